"""PokeAPI response shapes. Only the fields the commands read are declared."""

from pydantic import BaseModel, ConfigDict


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NamedResource(_ApiModel):
    name: str
    url: str = ""


class PokemonEncounter(_ApiModel):
    pokemon: NamedResource


class LocationArea(_ApiModel):
    id: int
    name: str
    pokemon_encounters: list[PokemonEncounter] = []


class PokemonStat(_ApiModel):
    base_stat: int
    stat: NamedResource


class PokemonType(_ApiModel):
    slot: int
    type: NamedResource


class Pokemon(_ApiModel):
    id: int
    name: str
    base_experience: int | None = None
    height: int
    weight: int
    stats: list[PokemonStat] = []
    types: list[PokemonType] = []
