"""
Tests for account API endpoints.

These test the HTTP layer: status codes and error bodies.
Business logic is tested in
test_account_service.py and test_balance_service.py.
"""


class TestCreateAccount:

    def test_create_with_id_returns_201(self, client):
        response = client.post("/api/v1/account/new", json={
            "id": 110,
            "name": "Bank",
            "account_type": "Cash",
        })
        assert response.status_code == 201
        assert response.json() == {
            "account_id": 110,
            "account_name": "Bank",
            "account_type": "Cash",
        }

    def test_create_without_id_uses_sequence(self, client):
        response = client.post("/api/v1/account/new", json={
            "name": "Sales",
            "account_type": "Revenue",
        })
        assert response.status_code == 201
        assert response.json()["account_id"] == 400

    def test_id_out_of_range_returns_400(self, client):
        response = client.post("/api/v1/account/new", json={
            "id": 1000,
            "name": "x",
            "account_type": "Cash",
        })
        assert response.status_code == 400
        assert "out of range" in response.json()["detail"]

    def test_unknown_type_returns_400(self, client):
        response = client.post("/api/v1/account/new", json={
            "name": "x",
            "account_type": "Liability",
        })
        assert response.status_code == 400
        assert "unknown account type" in response.json()["detail"]

    def test_duplicate_id_returns_409(self, client):
        response = client.post("/api/v1/account/new", json={
            "id": 100,
            "name": "Cash Again",
            "account_type": "Cash",
        })
        assert response.status_code == 409


class TestListAccounts:

    def test_list_includes_seeded_cash(self, client):
        response = client.get("/api/v1/account/list")
        assert response.status_code == 200

        data = response.json()
        assert data["timestamp"] is not None
        assert data["accounts"][0]["account_id"] == 100
        assert data["accounts"][0]["balance"] == 0


class TestAccountDetail:

    def test_detail_after_journal(self, client):
        r = client.post("/api/v1/account/new", json={
            "name": "Sales", "account_type": "Revenue",
        })
        sales_id = r.json()["account_id"]
        client.post("/api/v1/journal/new", json={
            "narrative": "Cash sale",
            "entries": [
                {"account_id": 100, "amount": 500},
                {"account_id": sales_id, "amount": -500},
            ],
        })

        response = client.get(f"/api/v1/account/{sales_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["total_debits"] == 0
        assert data["total_credits"] == 500
        assert data["balance"] == -500
        assert data["account_type"] == "Revenue"

    def test_nonexistent_account_returns_404(self, client):
        response = client.get("/api/v1/account/999")
        assert response.status_code == 404

    def test_entries_for_nonexistent_account_return_404(self, client):
        response = client.get("/api/v1/account/999/entries")
        assert response.status_code == 404

    def test_entries_listed(self, client):
        r = client.post("/api/v1/account/new", json={
            "name": "Sales", "account_type": "Revenue",
        })
        sales_id = r.json()["account_id"]
        client.post("/api/v1/journal/new", json={
            "entries": [
                {"account_id": 100, "amount": 75},
                {"account_id": sales_id, "amount": -75},
            ],
        })

        response = client.get("/api/v1/account/100/entries")
        assert response.status_code == 200
        assert [e["amount"] for e in response.json()] == [75]
