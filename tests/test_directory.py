"""Tests for the in-memory user directory and session slot."""
from jwt_pizza_mock import catalog
from jwt_pizza_mock.directory import UserDirectory, normalize_name_filter
from jwt_pizza_mock.models import Role, User, UserPatch
from jwt_pizza_mock.session import Session


class TestNameFilter:
    def test_strips_wildcards_and_whitespace(self):
        assert normalize_name_filter("*min*") == "min"
        assert normalize_name_filter("  *Ad Min* ") == "ad min"

    def test_missing_or_bare_wildcard_is_empty(self):
        assert normalize_name_filter(None) == ""
        assert normalize_name_filter("*") == ""


class TestUserDirectory:
    def test_list_users_filters_case_insensitively(self):
        directory = UserDirectory(catalog.profile_users())
        names = [user.name for user in directory.list_users("*MIN*")]
        assert names == ["Ad Min"]

    def test_list_users_without_filter_returns_everyone_in_order(self):
        directory = UserDirectory(catalog.profile_users())
        names = [user.name for user in directory.list_users("*")]
        assert names == ["Ad Min", "Di Ner", "Fran Chisee"]

    def test_register_assigns_increasing_ids_and_diner_role(self):
        directory = UserDirectory(catalog.profile_users(), first_id=100)
        first = directory.register("pizza diner", "pd@jwt.com", "diner")
        second = directory.register("other", "o@jwt.com", "x")

        assert first.id == "100"
        assert second.id == "101"
        assert first.has_role(Role.DINER)
        assert directory.find_by_email("pd@jwt.com") is first

    def test_next_id_skips_past_seeded_ids(self):
        directory = UserDirectory([User(id="150", name="x", email="x@jwt.com", password="p")], first_id=100)
        assert directory.register("y", "y@jwt.com", "p").id == "151"

    def test_duplicate_email_resolves_to_earliest_record(self):
        directory = UserDirectory(catalog.profile_users())
        directory.register("Second Admin", "a@jwt.com", "b")

        assert directory.find_by_email("a@jwt.com").name == "Ad Min"
        assert len(directory) == 4

    def test_email_change_releases_address_to_next_holder(self):
        directory = UserDirectory(catalog.profile_users())
        newer = directory.register("Second Admin", "a@jwt.com", "b")
        directory.update(UserPatch(id="1", email="moved@jwt.com"))

        assert directory.find_by_email("a@jwt.com") is newer
        assert directory.find_by_email("moved@jwt.com").name == "Ad Min"

    def test_email_change_onto_taken_address_keeps_owner(self):
        directory = UserDirectory(catalog.profile_users())
        directory.update(UserPatch(id="3", email="d@jwt.com"))

        assert directory.find_by_email("d@jwt.com").name == "Di Ner"
        assert directory.find_by_email("f@jwt.com") is None

    def test_update_only_touches_supplied_fields(self):
        directory = UserDirectory(catalog.profile_users())
        user = directory.update(UserPatch(id="2", name="Di Nerx"))

        assert user.name == "Di Nerx"
        assert user.email == "d@jwt.com"
        assert user.password == "d"

    def test_email_change_moves_login_lookup(self):
        directory = UserDirectory(catalog.profile_users())
        directory.update(UserPatch(id="2", email="new@jwt.com"))

        assert directory.find_by_email("d@jwt.com") is None
        assert directory.find_by_email("new@jwt.com").name == "Di Ner"

    def test_update_unknown_user_returns_none(self):
        directory = UserDirectory(catalog.profile_users())
        assert directory.update(UserPatch(id="999", name="Ghost")) is None


class TestUserPatch:
    def test_from_json_drops_empty_fields(self):
        patch = UserPatch.from_json({"id": 2, "name": "New", "email": "", "password": None})
        assert patch.id == "2"
        assert patch.name == "New"
        assert patch.email is None
        assert patch.password is None

    def test_path_id_used_when_body_has_none(self):
        patch = UserPatch.from_json({"name": "New"}, fallback_id="3")
        assert patch.id == "3"
        assert patch.to_dict() == {"id": "3", "name": "New"}


class TestSession:
    def test_login_clear_and_refresh(self):
        session = Session()
        kai, other = catalog.storefront_users()[:2]
        assert not session.is_authenticated

        session.login(kai)
        assert session.user is kai

        session.refresh(other)
        assert session.user is kai

        renamed = User(id=kai.id, name="Kai C", email=kai.email, password=kai.password)
        session.refresh(renamed)
        assert session.user is renamed

        session.clear()
        assert session.user is None
