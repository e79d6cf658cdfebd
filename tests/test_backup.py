"""Tests for backup export and import."""


class TestBackup:
    def test_export_contains_own_data(self, client, signup):
        ana = signup("ana@example.com", name="Ana")
        client.post("/api/todos", headers=ana["headers"], json={"title": "Call mom", "date": "2024-05-01"})
        client.post("/api/shopping", headers=ana["headers"], json={"name": "Rice"})
        client.post(
            "/api/exercises",
            headers=ana["headers"],
            json={"name": "Squat", "bodyPart": "bp-legs"},
        )
        client.post("/api/workouts", headers=ana["headers"], json={"date": "2024-05-02"})

        resp = client.get("/api/backup", headers=ana["headers"])
        assert resp.status_code == 200
        backup = resp.json()
        assert backup["version"] == "1.0.0"
        assert backup["timestamp"]
        data = backup["data"]
        assert [t["title"] for t in data["todos"]] == ["Call mom"]
        assert [i["name"] for i in data["shopping"]] == ["Rice"]
        assert [e["name"] for e in data["exercises"]] == ["Squat"]
        assert [w["date"] for w in data["workouts"]] == ["2024-05-02"]

    def test_import_replaces_existing_data(self, client, signup):
        ana = signup("ana@example.com")
        client.post("/api/todos", headers=ana["headers"], json={"title": "Stale", "date": "2024-01-01"})

        document = {
            "version": "1.0.0",
            "timestamp": "2024-06-01T10:00:00Z",
            "data": {
                "todos": [
                    {
                        "id": "t-1",
                        "title": "Water plants",
                        "date": "2024-06-01",
                        "recurrence": "weekly",
                        "completedDates": ["2024-06-08"],
                        "createdAt": "2024-06-01T09:00:00Z",
                    }
                ],
                "shopping": [{"id": "s-1", "name": "Soap", "quantity": 2, "category": "costco"}],
            },
        }
        resp = client.post("/api/backup", headers=ana["headers"], json=document)
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "todos": 1, "shopping": 1, "exercises": 0, "workouts": 0}

        [todo] = client.get("/api/todos", headers=ana["headers"]).json()
        assert todo["id"] == "t-1"
        assert todo["completedDates"] == ["2024-06-08"]
        [item] = client.get("/api/shopping", headers=ana["headers"]).json()
        assert (item["name"], item["quantity"], item["category"]) == ("Soap", 2, "costco")

    def test_export_then_import_round_trips(self, client, signup):
        ana = signup("ana@example.com")
        client.post(
            "/api/todos",
            headers=ana["headers"],
            json={"id": "t-9", "title": "Run", "date": "2024-05-01", "recurrence": "daily"},
        )
        exported = client.get("/api/backup", headers=ana["headers"]).json()
        resp = client.post("/api/backup", headers=ana["headers"], json=exported)
        assert resp.status_code == 200
        assert [t["id"] for t in client.get("/api/todos", headers=ana["headers"]).json()] == ["t-9"]

    def test_document_without_version_or_data_rejected(self, client, signup):
        ana = signup("ana@example.com")
        assert client.post("/api/backup", headers=ana["headers"], json={"data": {}}).status_code == 400
        assert client.post("/api/backup", headers=ana["headers"], json={"version": "1.0.0"}).status_code == 400
