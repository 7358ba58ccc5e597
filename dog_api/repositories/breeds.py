"""Breed store."""

from dog_api.models import Breed
from dog_api.repositories.base import Repository


class BreedRepository(Repository[Breed]):
    model = Breed
    resource = "Breed"
