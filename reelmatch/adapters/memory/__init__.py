"""
Adaptateurs en memoire pour ReelMatch.

- InMemoryLibraryStore: Store de bibliotheque et de studios sur listes
"""
