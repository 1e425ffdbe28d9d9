"""
Contact frontend: serves the static contact form and reverse-proxies ``/api``
calls to the backend named by ``BACKEND_URL``.
"""
