"""Unit tests for job use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.jobs import CreateJob, GetJob, ListJobs, CreateJobCommandDTO


@pytest.fixture
def mock_job_repo():
    repo = MagicMock()

    async def echo(job):
        return job

    repo.create = AsyncMock(side_effect=echo)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.list = AsyncMock(return_value=[])
    return repo


@pytest.mark.asyncio
class TestJobs:
    async def test_create_job_defaults_to_lead(self, mock_uow, mock_job_repo):
        result = await CreateJob(mock_uow, mock_job_repo).execute(
            CreateJobCommandDTO(
                account_id="acct-1",
                customer_id="cust-1",
                title="Replace water heater",
                estimated_labor_hours=Decimal("4"),
            )
        )

        assert result.is_ok()
        assert result.value.status == "lead"
        assert result.value.title == "Replace water heater"
        assert result.value.id
        mock_uow.commit.assert_called_once()

    async def test_create_job_failure_rolls_back(self, mock_uow, mock_job_repo):
        mock_job_repo.create = AsyncMock(side_effect=Exception("constraint"))

        result = await CreateJob(mock_uow, mock_job_repo).execute(
            CreateJobCommandDTO(account_id="acct-1", customer_id="cust-1", title="Paint fence")
        )

        assert result.error.code == "CREATE_JOB_FAILED"
        mock_uow.rollback.assert_called_once()

    async def test_get_missing_job(self, mock_job_repo):
        result = await GetJob(mock_job_repo).execute("missing")

        assert result.error.code == "JOB_NOT_FOUND"

    async def test_list_jobs(self, mock_job_repo):
        result = await ListJobs(mock_job_repo).execute(account_id="acct-1")

        assert result.value == []
        mock_job_repo.list.assert_called_once_with(account_id="acct-1", limit=50, offset=0)
