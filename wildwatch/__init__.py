"""
WildWatch

Field reporting for wildlife distress:

- a Flask relay that forwards photos and voice recordings to hosted OpenAI models
- a client that uploads media, keeps the session's sightings and renders them
  on a map or into a PDF report
"""

__version__ = "0.3.0"
