"""
Couche infrastructure.

- http/ : Transport HTTP (httpx)
- parsing/ : Motifs et fonctions d'extraction HTML
- cli/ : Commandes Typer
"""
