"""Storing users in a MongoDB collection."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace

import pymongo
from bson import ObjectId

DEFAULT_URI = "mongodb://localhost:27017"
DEFAULT_TIMEOUT = 3.0
DATABASE_NAME = "testing"
COLLECTION_NAME = "users"


@dataclass(frozen=True)
class User:
    """A user document; ``id`` is left out of the document while unset."""

    id: ObjectId | None = None
    name: str = ""
    email: str = ""

    def to_document(self):
        document = {}
        if self.id is not None:
            document["_id"] = self.id
        document["name"] = self.name
        document["email"] = self.email
        return document


class UserRepository:
    """Inserts users into a collection."""

    def __init__(self, collection):
        self.collection = collection

    def insert(self, user):
        """Insert ``user`` and return a copy carrying the stored id."""
        result = self.collection.insert_one(user.to_document())
        inserted_id = result.inserted_id
        if not isinstance(inserted_id, ObjectId):
            raise TypeError(f"inserted id {inserted_id!r} is not an ObjectId")
        return replace(user, id=inserted_id)


DEFAULT_USER = User(name="ranjith", email="ranjith@example.com")
FIRST_USER_DOCUMENT = {"fullName": "User_1", "age": 30}


def setup_db(uri=DEFAULT_URI, timeout=DEFAULT_TIMEOUT):
    """Connect, ping and insert the sample users concurrently.

    Returns the id of the plain document and the inserted ``User``.
    """
    client = pymongo.MongoClient(uri, serverSelectionTimeoutMS=int(timeout * 1000))
    try:
        client.admin.command("ping")
        collection = client.get_database(DATABASE_NAME).get_collection(COLLECTION_NAME)
        repository = UserRepository(collection)
        with ThreadPoolExecutor(max_workers=2) as pool:
            first = pool.submit(collection.insert_one, dict(FIRST_USER_DOCUMENT))
            second = pool.submit(repository.insert, DEFAULT_USER)
            first_id = first.result().inserted_id
            print(first_id)
            user = second.result()
            print(user.id)
    finally:
        client.close()
    return first_id, user