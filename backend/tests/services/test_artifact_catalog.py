"""Artifact Catalog — service-level tests for create, search, ranking, and upsert."""

import uuid

from sqlalchemy import Text, select

from app.core.domain_types import ArtifactId
from app.models.artifact import Artifact
from app.models.like import Like
from app.services.artifact_catalog import ArtifactCatalog


async def test_create_stores_payload_verbatim(test_db):
    catalog = ArtifactCatalog(test_db)
    ack = await catalog.create({
        "name": "Antikythera Mechanism",
        "author_email": "owner@example.com",
        "era": "Hellenistic",
        "image": "https://img.example/a.png",
    })

    assert ack["acknowledged"] is True
    doc = await catalog.get(uuid.UUID(ack["insertedId"]))
    assert doc == {
        "_id": ack["insertedId"],
        "name": "Antikythera Mechanism",
        "author_email": "owner@example.com",
        "liked_count": 0,
        "era": "Hellenistic",
        "image": "https://img.example/a.png",
    }


async def test_get_unknown_id_returns_none(test_db):
    assert await ArtifactCatalog(test_db).get(uuid.uuid4()) is None


async def test_search_is_case_insensitive_substring(make_artifact, test_db):
    await make_artifact(name="Temple Bell")
    await make_artifact(name="Ancient TEMPLE gate")
    await make_artifact(name="Bronze Sword")

    names = {a["name"] for a in await ArtifactCatalog(test_db).search("temple")}

    assert names == {"Temple Bell", "Ancient TEMPLE gate"}


async def test_search_treats_wildcards_literally(make_artifact, test_db):
    await make_artifact(name="100% bronze")
    await make_artifact(name="Iron helmet")

    names = [a["name"] for a in await ArtifactCatalog(test_db).search("%")]

    assert names == ["100% bronze"]


async def test_empty_search_returns_everything(make_artifact, test_db):
    for name in ("A", "B", "C"):
        await make_artifact(name=name)
    assert len(await ArtifactCatalog(test_db).search("")) == 3


async def test_top_returns_six_highest_descending(make_artifact, test_db):
    for count in (5, 1, 9, 3, 7, 2, 8, 4):
        await make_artifact(name=f"item-{count}", liked_count=count)

    top = await ArtifactCatalog(test_db).top()

    assert [a["liked_count"] for a in top] == [9, 8, 7, 5, 4, 3]


async def test_top_with_fewer_than_six_returns_all_sorted(make_artifact, test_db):
    for count in (2, 0, 5):
        await make_artifact(liked_count=count)

    top = await ArtifactCatalog(test_db).top()

    assert [a["liked_count"] for a in top] == [5, 2, 0]


async def test_top_ties_are_all_present(make_artifact, test_db):
    """Tie order is unspecified: assert membership, not position."""
    for name in ("a", "b", "c"):
        await make_artifact(name=name, liked_count=4)

    top = await ArtifactCatalog(test_db).top()

    assert sorted(a["name"] for a in top) == ["a", "b", "c"]


async def test_list_by_owner_filters_exactly(make_artifact, test_db):
    await make_artifact(author_email="a@x.io")
    await make_artifact(author_email="a@x.io")
    await make_artifact(author_email="A@x.io")

    owned = await ArtifactCatalog(test_db).list_by_owner("a@x.io")

    assert len(owned) == 2
    assert {a["author_email"] for a in owned} == {"a@x.io"}


async def test_update_sets_fields_and_merges_details(make_artifact, test_db):
    artifact = await make_artifact(name="Old", era="Iron")
    catalog = ArtifactCatalog(test_db)

    ack = await catalog.update(artifact.id, {"name": "New", "origin": "Crete"})

    assert ack["matchedCount"] == 1 and ack["modifiedCount"] == 1
    assert ack["upsertedId"] is None
    doc = await catalog.get(artifact.id)
    assert doc["name"] == "New"
    assert doc["era"] == "Iron"
    assert doc["origin"] == "Crete"


async def test_update_with_same_values_reports_not_modified(make_artifact, test_db):
    artifact = await make_artifact(name="Same")
    ack = await ArtifactCatalog(test_db).update(artifact.id, {"name": "Same"})
    assert ack["matchedCount"] == 1
    assert ack["modifiedCount"] == 0


async def test_update_unknown_id_upserts(test_db):
    new_id = uuid.uuid4()
    ack = await ArtifactCatalog(test_db).update(new_id, {"name": "Phantom"})

    assert ack["upsertedId"] == str(new_id)
    assert ack["upsertedCount"] == 1
    result = await test_db.execute(select(Artifact.name).where(Artifact.id == new_id))
    assert result.scalar_one() == "Phantom"


async def test_long_text_fields_stored_verbatim(test_db):
    catalog = ArtifactCatalog(test_db)
    long_name = "Codex " + "x" * 1000
    long_email = "curator." + "y" * 400 + "@museum.org"

    ack = await catalog.create({"name": long_name, "author_email": long_email})
    doc = await catalog.get(ArtifactId(uuid.UUID(ack["insertedId"])))

    assert doc["name"] == long_name
    assert doc["author_email"] == long_email


def test_text_columns_carry_no_length_cap():
    for column in (Artifact.__table__.c.name, Artifact.__table__.c.author_email,
                   Like.__table__.c.liked_by):
        assert isinstance(column.type, Text)
        assert column.type.length is None
