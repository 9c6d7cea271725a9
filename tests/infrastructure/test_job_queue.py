"""Tests for the in-process job queue."""
from patterns_demo.infrastructure.jobs import JobQueue


class TestJobQueue:

    def test_jobs_run_in_order(self, logger):
        queue = JobQueue(logger=logger)
        calls = []

        def record(value):
            calls.append(value)
            return value

        queue.dispatch("first", record, value="a")
        queue.dispatch("second", record, value="b")

        assert len(queue) == 2
        results = queue.run_pending()

        assert calls == ["a", "b"]
        assert [result.name for result in results] == ["first", "second"]
        assert all(result.succeeded for result in results)
        assert len(queue) == 0

    def test_failing_job_is_recorded(self, logger):
        queue = JobQueue(logger=logger)

        def boom():
            raise RuntimeError("exploded")

        queue.dispatch("boom", boom)
        queue.dispatch("fine", lambda: 42)
        failed, ok = queue.run_pending()

        assert failed.status == "failed"
        assert failed.error == "exploded"
        assert ok.result == 42
        logger.error.assert_called_once()
