"""
Commandes CLI Typer de tvcom.

- commands : series, episode
- helpers : console Rich, injection du container, gestion des erreurs
"""
