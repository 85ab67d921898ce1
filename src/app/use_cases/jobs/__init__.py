"""Job use cases"""
from .manage_jobs import CreateJob, GetJob, ListJobs
from .dtos import CreateJobCommandDTO, JobResponseDTO

__all__ = ["CreateJob", "GetJob", "ListJobs", "CreateJobCommandDTO", "JobResponseDTO"]
