"""
Extraction des champs depuis le HTML de TV.com.

- patterns : motifs d'extraction lies a la mise en page du site
- extractors : fonctions pures document -> valeur typee
"""
