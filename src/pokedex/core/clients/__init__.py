"""Upstream catalog clients."""

from pokedex.core.clients.pokeapi import PokeApiClient

__all__ = ["PokeApiClient"]
