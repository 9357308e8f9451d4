"""Tests for the current-user, user list and profile update routes."""


def _login(service, email, password):
    response = service.handle("PUT", "/api/auth", {"email": email, "password": password})
    assert response.status == 200
    return response.body["user"]


class TestCurrentUser:
    def test_empty_without_session(self, profile):
        response = profile.handle("GET", "/api/user/me")
        assert response.status == 200
        assert response.body is None

    def test_reading_has_no_side_effects(self, profile):
        _login(profile, "a@jwt.com", "a")
        first = profile.handle("GET", "/api/user/me").body
        second = profile.handle("GET", "/api/user/me").body
        assert first == second


class TestListUsers:
    def test_filter_min_matches_only_admin(self, profile):
        response = profile.handle("GET", "/api/user?page=0&limit=10&name=*min*")

        assert response.body["more"] is False
        assert [user["name"] for user in response.body["users"]] == ["Ad Min"]

    def test_wildcard_only_lists_everyone(self, profile):
        response = profile.handle("GET", "/api/user?name=*")
        assert [user["name"] for user in response.body["users"]] == ["Ad Min", "Di Ner", "Fran Chisee"]

    def test_no_query_lists_everyone(self, profile):
        response = profile.handle("GET", "http://localhost:3000/api/user")
        assert len(response.body["users"]) == 3

    def test_registered_users_appear_in_list(self, profile):
        profile.handle("POST", "/api/auth", {"name": "Pizza Diner", "email": "pd@jwt.com", "password": "x"})
        response = profile.handle("GET", "/api/user?name=pizza")
        assert [user["email"] for user in response.body["users"]] == ["pd@jwt.com"]


class TestUpdateUser:
    def test_name_only_update_keeps_credentials(self, profile):
        _login(profile, "d@jwt.com", "d")
        response = profile.handle("PUT", "/api/user/2", {"id": "2", "name": "Di Nerx"})

        assert response.body["token"] == "abcdef"
        assert response.body["user"]["name"] == "Di Nerx"
        assert response.body["user"]["email"] == "d@jwt.com"
        assert response.body["user"]["password"] == "d"

        me = profile.handle("GET", "/api/user/me").body
        assert me["name"] == "Di Nerx"
        assert me["email"] == "d@jwt.com"

    def test_credentials_update_changes_login(self, profile):
        _login(profile, "f@jwt.com", "f")
        profile.handle("PUT", "/api/user/3", {"id": "3", "email": "fran2@jwt.com", "password": "secret"})
        profile.handle("DELETE", "/api/auth")

        assert profile.handle("PUT", "/api/auth", {"email": "f@jwt.com", "password": "f"}).status == 401
        user = _login(profile, "fran2@jwt.com", "secret")
        assert user["name"] == "Fran Chisee"

    def test_update_persists_across_logout(self, profile):
        _login(profile, "a@jwt.com", "a")
        profile.handle("PUT", "/api/user/1", {"id": "1", "name": "admin42"})
        profile.handle("DELETE", "/api/auth")

        assert _login(profile, "a@jwt.com", "a")["name"] == "admin42"

    def test_path_id_used_when_body_omits_it(self, profile):
        response = profile.handle("PUT", "/api/user/2", {"name": "Renamed"})
        assert response.body["user"]["id"] == "2"
        assert profile.directory.get("2").name == "Renamed"

    def test_updating_other_user_leaves_session_alone(self, profile):
        _login(profile, "a@jwt.com", "a")
        profile.handle("PUT", "/api/user/2", {"id": "2", "name": "Changed"})
        assert profile.handle("GET", "/api/user/me").body["name"] == "Ad Min"

    def test_unknown_user_is_echoed(self, profile):
        response = profile.handle("PUT", "/api/user/77", {"name": "Ghost"})
        assert response.status == 200
        assert response.body["user"] == {"id": "77", "name": "Ghost"}

    def test_get_by_id_is_not_mocked(self, profile):
        assert profile.handle("GET", "/api/user/2") is None
