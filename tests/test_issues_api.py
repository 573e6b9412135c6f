"""
HTTP level tests for the issue endpoints.
"""

import pytest


def _create(client, **body):
    response = client.post("/issue", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateIssue:
    def test_create_unassigned(self, client):
        data = _create(client, title="bug")

        assert data["id"] == 1
        assert data["status"] == "PENDING"
        assert data["description"] == ""
        assert "user" not in data
        assert data["createdAt"] == data["updatedAt"]
        assert data["createdAt"].startswith("2024-01-01T09:00:00")

    def test_create_assigned(self, client):
        data = _create(client, title="bug", description="steps", userId=1)

        assert data["status"] == "IN_PROGRESS"
        assert data["user"] == {"id": 1, "name": "김개발"}
        assert data["description"] == "steps"

    @pytest.mark.parametrize("body", [{}, {"title": ""}, {"title": None}, {"description": "only"}])
    def test_missing_title(self, client, body):
        response = client.post("/issue", json=body)

        assert response.status_code == 400
        assert response.json()["code"] == 400
        assert "title" in response.json()["error"]

    def test_unknown_user_creates_nothing(self, client):
        response = client.post("/issue", json={"title": "t", "userId": 99})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid userId: 99", "code": 400}
        assert client.get("/issues").json() == {"issues": []}
        assert _create(client, title="next")["id"] == 1

    def test_invalid_json(self, client):
        response = client.post("/issue", content="{", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body", "code": 400}

    def test_wrong_user_id_type(self, client):
        response = client.post("/issue", json={"title": "t", "userId": "someone"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid userId"

    @pytest.mark.parametrize("user_id", [True, False, "1"])
    def test_non_integer_user_id_creates_nothing(self, client, user_id):
        response = client.post("/issue", json={"title": "t", "userId": user_id})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid userId", "code": 400}
        assert client.get("/issues").json() == {"issues": []}

    def test_snake_case_user_id_is_not_read(self, client):
        data = _create(client, title="t", user_id=1)

        assert data["status"] == "PENDING"
        assert "user" not in data


class TestListIssues:
    def test_empty_list_is_array(self, client):
        response = client.get("/issues")

        assert response.status_code == 200
        assert response.json() == {"issues": []}

    def test_filter_by_status(self, client):
        _create(client, title="a")
        _create(client, title="b", userId=2)

        response = client.get("/issues", params={"status": "IN_PROGRESS"})
        issues = response.json()["issues"]
        assert [issue["title"] for issue in issues] == ["b"]
        assert issues[0]["user"] == {"id": 2, "name": "이디자인"}

    def test_empty_filter_returns_all(self, client):
        _create(client, title="a")
        _create(client, title="b")

        assert len(client.get("/issues?status=").json()["issues"]) == 2

    def test_bogus_filter(self, client):
        response = client.get("/issues?status=BOGUS")

        assert response.status_code == 400
        assert response.json()["code"] == 400

    def test_list_matches_create_response(self, client):
        created = _create(client, title="bug", description="d", userId=3)
        listed = client.get("/issues").json()["issues"]

        assert listed == [created]


class TestGetIssue:
    def test_detail_omits_assignee(self, client):
        created = _create(client, title="bug", userId=1)
        response = client.get(f"/issue/{created['id']}")

        assert response.status_code == 200
        detail = response.json()
        assert "user" not in detail
        assert detail == {key: value for key, value in created.items() if key != "user"}

    @pytest.mark.parametrize("raw_id", ["abc", "0", "-1", "1.5"])
    def test_bad_id(self, client, raw_id):
        response = client.get(f"/issue/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid issue id", "code": 400}

    def test_not_found(self, client):
        response = client.get("/issue/5")

        assert response.status_code == 404
        assert response.json() == {"error": "Issue not found", "code": 404}


class TestUpdateIssue:
    def test_lifecycle_scenario(self, client):
        issue = _create(client, title="bug")
        assert issue["status"] == "PENDING"
        assert "user" not in issue

        response = client.patch(f"/issue/{issue['id']}", json={"userId": 1})
        assert response.status_code == 200
        assert response.json()["status"] == "IN_PROGRESS"
        assert response.json()["user"]["id"] == 1

        response = client.patch(f"/issue/{issue['id']}", json={"status": "COMPLETED"})
        assert response.status_code == 200
        assert response.json()["status"] == "COMPLETED"

        response = client.patch(f"/issue/{issue['id']}", json={"title": "x"})
        assert response.status_code == 403
        assert response.json()["code"] == 403

    def test_clear_assignee_wins_over_status(self, client):
        issue = _create(client, title="bug", userId=2)
        response = client.patch(f"/issue/{issue['id']}", json={"userId": 0, "status": "COMPLETED"})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "PENDING"
        assert "user" not in data

    def test_null_user_id_is_no_change(self, client):
        issue = _create(client, title="bug", userId=2)
        response = client.patch(f"/issue/{issue['id']}", json={"userId": None, "description": "more"})

        assert response.status_code == 200
        assert response.json()["user"]["id"] == 2
        assert response.json()["description"] == "more"

    def test_unassigned_cannot_start(self, client):
        issue = _create(client, title="bug")
        response = client.patch(f"/issue/{issue['id']}", json={"status": "IN_PROGRESS", "title": "new"})

        assert response.status_code == 400
        assert client.get(f"/issue/{issue['id']}").json()["title"] == "bug"

    def test_invalid_status(self, client):
        issue = _create(client, title="bug", userId=1)
        response = client.patch(f"/issue/{issue['id']}", json={"status": "DONE"})

        assert response.status_code == 400

    def test_invalid_user(self, client):
        issue = _create(client, title="bug")
        response = client.patch(f"/issue/{issue['id']}", json={"userId": 42})

        assert response.status_code == 400

    def test_negative_user(self, client):
        issue = _create(client, title="bug")
        response = client.patch(f"/issue/{issue['id']}", json={"userId": -1})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid userId: -1", "code": 400}

    def test_negative_user_on_missing_issue(self, client):
        response = client.patch("/issue/77", json={"userId": -1})

        assert response.status_code == 404
        assert response.json() == {"error": "Issue not found", "code": 404}

    @pytest.mark.parametrize("user_id", [True, False, "1"])
    def test_non_integer_user_id_rejected(self, client, user_id):
        issue = _create(client, title="bug", userId=2)
        response = client.patch(f"/issue/{issue['id']}", json={"userId": user_id})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid userId", "code": 400}
        unchanged = client.get("/issues").json()["issues"][0]
        assert unchanged["status"] == "IN_PROGRESS"
        assert unchanged["user"]["id"] == 2

    def test_snake_case_user_id_is_not_read(self, client):
        issue = _create(client, title="bug")
        response = client.patch(f"/issue/{issue['id']}", json={"user_id": 1})

        assert response.status_code == 200
        assert response.json()["status"] == "PENDING"
        assert "user" not in response.json()

    @pytest.mark.parametrize("terminal", ["CANCELLED", "COMPLETED"])
    @pytest.mark.parametrize(
        "payload",
        [{}, {"status": "BOGUS"}, {"userId": 0}, {"userId": 99}, {"userId": -1}],
    )
    def test_terminal_issue_forbidden(self, client, terminal, payload):
        issue = _create(client, title="bug", userId=1)
        assert client.patch(f"/issue/{issue['id']}", json={"status": terminal}).status_code == 200

        response = client.patch(f"/issue/{issue['id']}", json=payload)
        assert response.status_code == 403

    def test_not_found(self, client):
        response = client.patch("/issue/9", json={"title": "x"})
        assert response.status_code == 404

    def test_bad_id(self, client):
        response = client.patch("/issue/zero", json={"title": "x"})
        assert response.status_code == 400

    def test_updated_at_moves(self, client):
        issue = _create(client, title="bug")
        data = client.patch(f"/issue/{issue['id']}", json={"title": "renamed"}).json()

        assert data["title"] == "renamed"
        assert data["createdAt"] == issue["createdAt"]
        assert data["updatedAt"] > issue["updatedAt"]


class TestAuxiliaryRoutes:
    def test_users(self, client):
        response = client.get("/users")

        assert response.status_code == 200
        assert [user["id"] for user in response.json()] == [1, 2, 3]

    def test_health(self, client):
        _create(client, title="bug")
        assert client.get("/health").json() == {"status": "ok", "issues": 1}

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "code": 404}

    def test_wrong_method_uses_error_envelope(self, client):
        response = client.delete("/issue/1")

        assert response.status_code == 405
        assert response.json()["code"] == 405
