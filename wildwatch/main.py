from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask
from flask_cors import CORS

from wildwatch import config
from wildwatch.api.relay import api
from wildwatch.media.storage import ensure_upload_dir
from wildwatch.screening.policy import RejectionPolicy

# ================================
# APP FACTORY
# ================================


def create_app(
    upload_dir: Optional[str] = None,
    openai_client: Optional[Any] = None,
    policy: Optional[RejectionPolicy] = None,
) -> Flask:
    """
    Build the relay app.

    openai_client / policy override the lazily-created OpenAI client and
    the env-configured rejection policy (tests pass fakes here).
    """
    app = Flask(__name__)
    CORS(app)

    app.config["UPLOAD_DIR"] = ensure_upload_dir(upload_dir or config.UPLOAD_DIR)
    app.config["OPENAI_CLIENT"] = openai_client
    app.config["REJECTION_POLICY"] = policy or RejectionPolicy.from_env()

    app.register_blueprint(api)
    logging.info("[INIT] relay ready, uploads in %s", app.config["UPLOAD_DIR"])
    return app
