"""
Couche domaine (core).

Contient les ports, les exceptions metier, les objets valeur et les
snapshots immutables. Cette couche n'a AUCUNE dependance vers
l'infrastructure (httpx, CLI, configuration).

Sous-packages :
- ports/ : Interfaces abstraites (ITransport)
- entities/ : Snapshots immutables (SeriesDetails, EpisodeDetails)
- value_objects/ : Etat de remplissage des champs (Fetched, FieldCache)
"""
