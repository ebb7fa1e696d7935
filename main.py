import logging

from dotenv import load_dotenv

load_dotenv()

from wildwatch import config  # noqa: E402
from wildwatch.main import create_app  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s:%(message)s")

app = create_app()


if __name__ == "__main__":
    logging.info(f"Backend running at http://localhost:{config.PORT}")
    app.run(host="0.0.0.0", port=config.PORT)
