"""
Test suite for /companies endpoints.

Tests cover:
- Admin-only writes
- Listing with filters
- Detail with jobs
- Error handling
"""


class TestCompanyCreation:
    """Tests for POST /companies"""

    new_company = {
        "handle": "new",
        "name": "New",
        "logoUrl": "http://new.img",
        "description": "DescNew",
        "numEmployees": 10,
    }

    def test_create_company_as_admin(self, client, admin_headers):
        response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": self.new_company}

    def test_create_company_non_admin(self, client, u1_headers):
        response = client.post("/companies", json=self.new_company, headers=u1_headers)
        assert response.status_code == 401

    def test_create_company_anon(self, client):
        response = client.post("/companies", json=self.new_company)
        assert response.status_code == 401

    def test_create_company_missing_fields(self, client, admin_headers):
        response = client.post("/companies", json={"handle": "new", "numEmployees": 10}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_company_invalid_data(self, client, admin_headers):
        response = client.post(
            "/companies",
            json={**self.new_company, "numEmployees": "not-a-number"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_create_company_employees_out_of_range(self, client, admin_headers):
        response = client.post(
            "/companies",
            json={**self.new_company, "numEmployees": 2**31},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_create_company_duplicate(self, client, admin_headers):
        response = client.post(
            "/companies",
            json={**self.new_company, "handle": "c1"},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert "duplicate" in response.json()["detail"].lower()

    def test_create_company_duplicate_name(self, client, admin_headers):
        response = client.post("/companies", json={**self.new_company, "name": "C2"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"detail": "Duplicate company name: C2"}


class TestCompanyListing:
    """Tests for GET /companies"""

    def test_list_companies_anon(self, client):
        response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {
            "companies": [
                {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": "http://c1.img"},
                {"handle": "c2", "name": "C2", "description": "Desc2", "numEmployees": 2, "logoUrl": "http://c2.img"},
                {"handle": "c3", "name": "C3", "description": "Desc3", "numEmployees": 3, "logoUrl": "http://c3.img"},
            ]
        }

    def test_filter_by_name(self, client):
        response = client.get("/companies?name=1")
        assert [c["handle"] for c in response.json()["companies"]] == ["c1"]

    def test_filter_by_employee_range(self, client):
        response = client.get("/companies?minEmployees=2&maxEmployees=2")
        assert [c["handle"] for c in response.json()["companies"]] == ["c2"]

    def test_min_greater_than_max(self, client):
        response = client.get("/companies?minEmployees=3&maxEmployees=1")
        assert response.status_code == 400

    def test_non_numeric_filter(self, client):
        response = client.get("/companies?minEmployees=lots")
        assert response.status_code == 400

    def test_employee_filter_out_of_range(self, client):
        response = client.get(f"/companies?minEmployees={10**20}")
        assert response.status_code == 400


class TestCompanyRetrieval:
    """Tests for GET /companies/{handle}"""

    def test_get_company_with_jobs(self, client, job_ids):
        response = client.get("/companies/c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["handle"] == "c1"
        assert company["jobs"] == [
            {"id": job_ids["job1"], "title": "job1", "salary": 50000, "equity": "0"},
            {"id": job_ids["job2"], "title": "job2", "salary": 60000, "equity": "0.3"},
        ]

    def test_get_company_without_jobs(self, client):
        response = client.get("/companies/c3")
        assert response.json()["company"]["jobs"] == []

    def test_get_nonexistent_company(self, client):
        response = client.get("/companies/nope")

        assert response.status_code == 404
        assert "no company" in response.json()["detail"].lower()


class TestCompanyUpdate:
    """Tests for PATCH /companies/{handle}"""

    def test_update_as_admin(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {
            "company": {
                "handle": "c1",
                "name": "C1-new",
                "description": "Desc1",
                "numEmployees": 1,
                "logoUrl": "http://c1.img",
            }
        }

    def test_update_non_admin(self, client, u1_headers):
        response = client.patch("/companies/c1", json={"name": "C1-new"}, headers=u1_headers)
        assert response.status_code == 401

    def test_update_nonexistent(self, client, admin_headers):
        response = client.patch("/companies/nope", json={"name": "x"}, headers=admin_headers)
        assert response.status_code == 404

    def test_update_handle_not_allowed(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_empty_body(self, client, admin_headers):
        response = client.patch("/companies/c1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"


class TestCompanyDeletion:
    """Tests for DELETE /companies/{handle}"""

    def test_delete_as_admin(self, client, admin_headers):
        response = client.delete("/companies/c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}
        assert client.get("/companies/c1").status_code == 404

    def test_delete_non_admin(self, client, u1_headers):
        response = client.delete("/companies/c1", headers=u1_headers)
        assert response.status_code == 401

    def test_delete_nonexistent(self, client, admin_headers):
        response = client.delete("/companies/nope", headers=admin_headers)
        assert response.status_code == 404
