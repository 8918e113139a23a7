"""
Services metier du moteur d'identification.

Contient la table d'alias de studios, le matcher de candidats et le moteur
qui orchestre parsing, resolution des studios et selection.
"""
