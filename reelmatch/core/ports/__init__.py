"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le moteur de matching a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports store : Contrats de lecture des données
- ILibraryStore : Pools de candidats (par titre, par studio + date)
- IStudioStore : Identités des studios

Port parsing :
- ITitleParser : Parsing des noms de release
"""

from reelmatch.core.ports.parser import ITitleParser
from reelmatch.core.ports.stores import ILibraryStore, IStudioStore

__all__ = [
    # Stores
    "ILibraryStore",
    "IStudioStore",
    # Parsing
    "ITitleParser",
]
