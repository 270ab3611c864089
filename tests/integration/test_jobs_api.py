"""
API tests for the job endpoints.
"""

from uuid import uuid4

import pytest

from fieldops.config.settings import settings

pytestmark = pytest.mark.integration

API = settings.API_PREFIX


@pytest.fixture
def job_payload(seed):
    return {
        "name": "Replace water heater",
        "description": "Old unit is leaking",
        "jobTypeId": str(seed.job_type_id),
        "clientId": str(seed.client_id),
        "companyId": str(seed.company_id),
        "dispatcherId": str(seed.dispatcher_id),
    }


async def post_job(api_client, auth_headers, seed, payload):
    response = await api_client.post(
        f"{API}/job", json=payload, headers=auth_headers(seed.dispatcher_id)
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestJobsApi:
    """Test cases for the job routes."""

    @pytest.mark.asyncio
    async def test_create_job(self, api_client, auth_headers, seed, job_payload):
        body = await post_job(api_client, auth_headers, seed, job_payload)

        assert body["status"] == "CREATED"
        assert body["name"] == "Replace water heater"
        assert body["jobType"]["name"] == "Repair"
        assert body["client"]["firstName"] == "Carla"
        assert body["technicians"] == []

        workflow = await api_client.get(
            f"{API}/{body['id']}/jobworkflow", headers=auth_headers(seed.owner_id)
        )
        assert [step["status"] for step in workflow.json()["steps"]] == ["CREATED"]

    @pytest.mark.asyncio
    async def test_create_job_requires_token(self, api_client, job_payload):
        response = await api_client.post(f"{API}/job", json=job_payload)

        assert response.status_code == 401
        assert response.json()["status"] == 401

    @pytest.mark.asyncio
    async def test_create_job_rejects_bad_token(self, api_client, job_payload):
        response = await api_client.post(
            f"{API}/job", json=job_payload, headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_job_technician_forbidden(
        self, api_client, auth_headers, seed, job_payload
    ):
        response = await api_client.post(
            f"{API}/job", json=job_payload, headers=auth_headers(seed.technician_ids[0])
        )

        assert response.status_code == 403
        assert response.json()["status"] == 403

    @pytest.mark.asyncio
    async def test_create_job_missing_fields(self, api_client, auth_headers, seed, job_payload):
        del job_payload["name"]
        del job_payload["clientId"]

        response = await api_client.post(
            f"{API}/job", json=job_payload, headers=auth_headers(seed.dispatcher_id)
        )

        body = response.json()
        assert response.status_code == 400
        assert body["status"] == 400
        assert len(body["errors"]) == 2

    @pytest.mark.asyncio
    async def test_create_job_unknown_client(self, api_client, auth_headers, seed, job_payload):
        job_payload["clientId"] = str(uuid4())

        response = await api_client.post(
            f"{API}/job", json=job_payload, headers=auth_headers(seed.dispatcher_id)
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_job_blank_location_city(
        self, api_client, auth_headers, seed, job_payload
    ):
        job_payload["location"] = {"city": "   ", "state": "TX", "zip": "78701"}

        response = await api_client.post(
            f"{API}/job", json=job_payload, headers=auth_headers(seed.dispatcher_id)
        )

        body = response.json()
        assert response.status_code == 400
        assert body["status"] == 400
        assert any("city" in error for error in body["errors"])

    @pytest.mark.asyncio
    async def test_create_job_location_is_trimmed(
        self, api_client, auth_headers, seed, job_payload
    ):
        job_payload["location"] = {"city": " Austin ", "state": "TX ", "zip": "78701"}

        body = await post_job(api_client, auth_headers, seed, job_payload)

        assert body["location"]["city"] == "Austin"
        assert body["location"]["state"] == "TX"

    @pytest.mark.asyncio
    async def test_assign_blank_location_state(
        self, api_client, auth_headers, seed, job_payload
    ):
        job = await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.put(
            f"{API}/assign/{job['id']}",
            json={
                "technicianIds": [str(seed.technician_ids[0])],
                "location": {"city": "Austin", "state": " ", "zip": "78701"},
            },
            headers=auth_headers(seed.dispatcher_id),
        )

        assert response.status_code == 400
        assert any("state" in error for error in response.json()["errors"])

        stored = await api_client.get(
            f"{API}/{job['id']}/retrievejob", headers=auth_headers(seed.dispatcher_id)
        )
        assert stored.json()["status"] == "CREATED"
        assert stored.json()["technicians"] == []

    @pytest.mark.asyncio
    async def test_update_blank_location_zip(
        self, api_client, auth_headers, seed, job_payload
    ):
        job = await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.put(
            f"{API}/{job['id']}/updatejob",
            json={"location": {"city": "Austin", "state": "TX", "zip": "  "}},
            headers=auth_headers(seed.owner_id),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_assign_schedule_complete_delete(
        self, api_client, auth_headers, seed, job_payload
    ):
        job = await post_job(api_client, auth_headers, seed, job_payload)
        dispatcher = auth_headers(seed.dispatcher_id)

        assigned = await api_client.put(
            f"{API}/assign/{job['id']}",
            json={
                "technicianIds": [str(t) for t in seed.technician_ids],
                "location": {"city": "Austin", "state": "TX", "zip": "78701"},
            },
            headers=dispatcher,
        )
        assert assigned.status_code == 200, assigned.text
        assert assigned.json()["status"] == "ASSIGNED"
        assert len(assigned.json()["technicians"]) == 2
        assert assigned.json()["location"]["city"] == "Austin"

        scheduled = await api_client.put(
            f"{API}/{job['id']}/schedulejob",
            json={"jobSchedule": {"startDate": "2026-11-02T09:00:00Z", "recurrence": "weekly"}},
            headers=dispatcher,
        )
        assert scheduled.status_code == 200, scheduled.text
        assert scheduled.json()["status"] == "SCHEDULED"
        assert scheduled.json()["jobSchedule"]["recurrence"] == "WEEKLY"

        completed = await api_client.patch(
            f"{API}/{job['id']}/updatejobstatus",
            json={"status": "completed"},
            headers=auth_headers(seed.technician_ids[0]),
        )
        body = completed.json()
        assert completed.status_code == 200, completed.text
        assert body["job"]["status"] == "COMPLETED"
        assert body["previousStatus"] == "SCHEDULED"
        assert body["stepRecorded"] is True
        assert [step["status"] for step in body["workflow"]["steps"]] == [
            "CREATED",
            "ASSIGNED",
            "SCHEDULED",
            "COMPLETED",
        ]

        deleted = await api_client.delete(
            f"{API}/{job['id']}/deletejob", headers=auth_headers(seed.owner_id)
        )
        assert deleted.status_code == 200

        missing = await api_client.get(
            f"{API}/{job['id']}/retrievejob", headers=dispatcher
        )
        assert missing.status_code == 404
        assert missing.json() == {"status": 404, "message": "Job not found"}

    @pytest.mark.asyncio
    async def test_assign_unknown_technician(self, api_client, auth_headers, seed, job_payload):
        job = await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.put(
            f"{API}/assign/{job['id']}",
            json={"technicianIds": [str(seed.technician_ids[0]), str(uuid4())]},
            headers=auth_headers(seed.dispatcher_id),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "One or more technician IDs are invalid"

    @pytest.mark.asyncio
    async def test_assign_missing_job(self, api_client, auth_headers, seed):
        response = await api_client.put(
            f"{API}/assign/{uuid4()}",
            json={"technicianIds": [str(seed.technician_ids[0])]},
            headers=auth_headers(seed.dispatcher_id),
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_schedule_end_before_start(self, api_client, auth_headers, seed, job_payload):
        job = await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.put(
            f"{API}/{job['id']}/schedulejob",
            json={
                "jobSchedule": {
                    "startDate": "2026-11-02T09:00:00Z",
                    "endDate": "2026-11-01T09:00:00Z",
                }
            },
            headers=auth_headers(seed.dispatcher_id),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "End date cannot be earlier than start date"

    @pytest.mark.asyncio
    async def test_invalid_status(self, api_client, auth_headers, seed, job_payload):
        job = await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.patch(
            f"{API}/{job['id']}/updatejobstatus",
            json={"status": "FINISHED"},
            headers=auth_headers(seed.dispatcher_id),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_job(self, api_client, auth_headers, seed, job_payload):
        job = await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.put(
            f"{API}/{job['id']}/updatejob",
            json={
                "description": "Unit replaced under warranty",
                "technicianIds": [str(seed.technician_ids[1])],
                "status": "ONGOING",
            },
            headers=auth_headers(seed.owner_id),
        )

        body = response.json()
        assert response.status_code == 200, response.text
        assert body["name"] == "Replace water heater"
        assert body["description"] == "Unit replaced under warranty"
        assert body["status"] == "ONGOING"
        assert [t["id"] for t in body["technicians"]] == [str(seed.technician_ids[1])]

    @pytest.mark.asyncio
    async def test_company_reads(self, api_client, auth_headers, seed, job_payload):
        for index in range(6):
            job_payload["name"] = f"Job {index}"
            await post_job(api_client, auth_headers, seed, job_payload)
        headers = auth_headers(seed.technician_ids[0])

        jobs = await api_client.get(f"{API}/{seed.company_id}/retrievejobs", headers=headers)
        feed = await api_client.get(f"{API}/{seed.company_id}/jobfeed", headers=headers)
        workflows = await api_client.get(f"{API}/{seed.company_id}/workflow", headers=headers)
        metrics = await api_client.get(f"{API}/{seed.company_id}/jobmetrics", headers=headers)

        assert len(jobs.json()) == 6
        assert [job["name"] for job in feed.json()] == [f"Job {i}" for i in (5, 4, 3, 2, 1)]
        assert len(workflows.json()) == 6
        assert metrics.json()["counts"]["CREATED"] == 6
        assert metrics.json()["total"] == 6

    @pytest.mark.asyncio
    async def test_company_without_workflows(self, api_client, auth_headers, seed):
        response = await api_client.get(
            f"{API}/{seed.other_company_id}/workflow", headers=auth_headers(seed.owner_id)
        )

        assert response.status_code == 404


class TestJobTypesApi:
    """Test cases for the job type routes."""

    @pytest.mark.asyncio
    async def test_bulk_create_and_list(self, api_client, auth_headers, seed):
        headers = auth_headers(seed.owner_id)

        created = await api_client.post(
            f"{API}/jobtypes",
            json={"jobTypes": ["Inspection", "Repair", "Inspection"]},
            headers=headers,
        )
        listed = await api_client.get(f"{API}/jobtypes", headers=headers)

        assert created.status_code == 201
        assert created.json()["created"] == 1
        assert [job_type["name"] for job_type in listed.json()] == ["Inspection", "Repair"]

    @pytest.mark.asyncio
    async def test_empty_bulk_create(self, api_client, auth_headers, seed):
        response = await api_client.post(
            f"{API}/jobtypes", json={"jobTypes": []}, headers=auth_headers(seed.owner_id)
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide an array of job types"


class TestHealthApi:
    @pytest.mark.asyncio
    async def test_liveness(self, api_client):
        response = await api_client.get(f"{API}/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    @pytest.mark.asyncio
    async def test_metrics(self, api_client, auth_headers, seed, job_payload):
        await post_job(api_client, auth_headers, seed, job_payload)

        response = await api_client.get(f"{API}/health/metrics")

        assert response.status_code == 200
        assert "jobs_created_total" in response.text
