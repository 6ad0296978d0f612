"""Resume lifecycle: archive, restore, permanent delete and the listings."""

import pytest
from bson import ObjectId

from resumehub.errors import NotFoundError
from resumehub.services import resume_service, user_service

MISSING_ID = "64b000000000000000000000"


@pytest.fixture
def owner(store, hasher):
    return user_service.register_user(store, hasher, "Jane", "jane@example.com", "pw123")


def _upload(store, owner, name="cv.pdf"):
    return resume_service.upload_resume(store, owner["id"], name, "my resume", "data:application/pdf;base64,AAAA")


def _raw(store, resume_id):
    return store.resumes_collection().find_one({"_id": ObjectId(resume_id)})


class TestUpload:

    def test_returns_stored_resume(self, store, owner):
        resume = _upload(store, owner)
        assert resume["id"]
        assert resume["userId"] == owner["id"]
        assert resume["fileName"] == "cv.pdf"
        assert "uploadedAt" in resume
        assert "archived" not in resume
        assert _raw(store, resume["id"]).get("archived") is None

    def test_owner_is_not_checked(self, store):
        resume = resume_service.upload_resume(store, "ghost", "cv.pdf", "", "data")
        assert resume["userId"] == "ghost"


class TestArchiveRestore:

    def test_archive_sets_both_markers(self, store, owner):
        resume = _upload(store, owner)
        resume_service.archive_resume(store, resume["id"])
        doc = _raw(store, resume["id"])
        assert doc["archived"] is True
        assert doc["archivedAt"] is not None

    def test_rearchive_resets_timestamp(self, store, owner, clock):
        resume = _upload(store, owner)
        resume_service.archive_resume(store, resume["id"])
        first = _raw(store, resume["id"])["archivedAt"]
        resume_service.archive_resume(store, resume["id"])
        assert _raw(store, resume["id"])["archivedAt"] > first

    def test_restore_removes_markers(self, store, owner):
        resume = _upload(store, owner)
        never_archived = _upload(store, owner, "other.pdf")
        resume_service.archive_resume(store, resume["id"])
        resume_service.restore_resume(store, resume["id"])

        doc = _raw(store, resume["id"])
        assert "archived" not in doc
        assert "archivedAt" not in doc
        assert set(doc) == set(_raw(store, never_archived["id"]))

    def test_restore_never_archived_is_noop(self, store, owner):
        resume = _upload(store, owner)
        before = _raw(store, resume["id"])
        resume_service.restore_resume(store, resume["id"])
        assert _raw(store, resume["id"]) == before

    @pytest.mark.parametrize("op", [resume_service.archive_resume, resume_service.restore_resume])
    def test_unknown_resume(self, store, op):
        with pytest.raises(NotFoundError):
            op(store, MISSING_ID)

    def test_malformed_id_is_not_found(self, store):
        with pytest.raises(NotFoundError):
            resume_service.archive_resume(store, "xyz")


class TestPermanentDelete:

    @pytest.mark.parametrize("archive_first", [False, True])
    def test_removed_from_both_listings(self, store, owner, archive_first):
        resume = _upload(store, owner)
        if archive_first:
            resume_service.archive_resume(store, resume["id"])

        resume_service.delete_resume_permanently(store, resume["id"])

        assert resume_service.list_active_resumes(store, owner["id"]) == []
        assert resume_service.list_archived_resumes(store, owner["id"]) == []

    def test_deleted_is_terminal(self, store, owner):
        resume = _upload(store, owner)
        resume_service.delete_resume_permanently(store, resume["id"])
        for op in (resume_service.archive_resume, resume_service.restore_resume,
                   resume_service.delete_resume_permanently):
            with pytest.raises(NotFoundError):
                op(store, resume["id"])


class TestListings:

    def test_active_excludes_archived_newest_first(self, store, owner, clock):
        first = _upload(store, owner, "first.pdf")
        second = _upload(store, owner, "second.pdf")
        hidden = _upload(store, owner, "hidden.pdf")
        resume_service.archive_resume(store, hidden["id"])

        active = resume_service.list_active_resumes(store, owner["id"])

        assert [r["id"] for r in active] == [second["id"], first["id"]]
        assert all(r.get("archived") is not True for r in active)

    def test_archived_only_archived_latest_archive_first(self, store, owner, clock):
        a = _upload(store, owner, "a.pdf")
        b = _upload(store, owner, "b.pdf")
        _upload(store, owner, "c.pdf")
        resume_service.archive_resume(store, b["id"])
        resume_service.archive_resume(store, a["id"])

        archived = resume_service.list_archived_resumes(store, owner["id"])

        assert [r["id"] for r in archived] == [a["id"], b["id"]]
        assert all(r["archived"] is True for r in archived)

    def test_explicit_false_counts_as_active(self, store, owner):
        resume = _upload(store, owner)
        store.resumes_collection().update_one({"fileName": "cv.pdf"}, {"$set": {"archived": False}})
        assert [r["id"] for r in resume_service.list_active_resumes(store, owner["id"])] == [resume["id"]]
        assert resume_service.list_archived_resumes(store, owner["id"]) == []

    def test_listing_is_per_owner(self, store, hasher, owner):
        other = user_service.register_user(store, hasher, "Bob", "bob@example.com", "pw")
        _upload(store, owner)
        assert resume_service.list_active_resumes(store, other["id"]) == []


class TestListAllActiveWithOwners:

    def test_joins_owner_name_and_email(self, store, owner, clock):
        _upload(store, owner, "one.pdf")
        archived = _upload(store, owner, "two.pdf")
        resume_service.archive_resume(store, archived["id"])

        listed = resume_service.list_active_resumes_with_owners(store)

        assert len(listed) == 1
        assert listed[0]["userName"] == "Jane"
        assert listed[0]["userEmail"] == "jane@example.com"

    def test_orphaned_resume_gets_sentinels(self, store, owner):
        _upload(store, owner)
        store.users_collection().delete_many({})

        listed = resume_service.list_active_resumes_with_owners(store)

        assert listed[0]["userName"] == "Unknown User"
        assert listed[0]["userEmail"] == "Unknown Email"

    def test_newest_upload_first_across_users(self, store, hasher, owner, clock):
        other = user_service.register_user(store, hasher, "Bob", "bob@example.com", "pw")
        older = _upload(store, owner)
        newer = _upload(store, other)
        listed = resume_service.list_active_resumes_with_owners(store)
        assert [r["id"] for r in listed] == [newer["id"], older["id"]]
