"""Constantes partagées par les tests d'API."""

API = "/api/v1"
ADMIN_EMAIL = "admin@agri-calendar.io"
ADMIN_PASSWORD = "S3cret-pass!"
