"""Utilitaires partages (constantes, construction des URLs)."""
