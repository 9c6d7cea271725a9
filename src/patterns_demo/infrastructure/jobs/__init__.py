from .job_queue import Job, JobQueue, JobResult

__all__ = ['Job', 'JobQueue', 'JobResult']
