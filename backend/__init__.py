"""
Contact backend: FastAPI service that stores contact-form submissions in MongoDB.

Build the application with ``backend.main.create_app``; run it with
``python -m backend``.
"""
