from django.test import TestCase
import pytest

from sparring.apps.tasks.models import Task


@pytest.mark.django_db
class TestTaskQueue(TestCase):

    pytestmark = pytest.mark.django_db

    def test_enqueue_dedupes(self):
        first = Task.enqueue(Task.GENERATE_DRAFT, "abc")
        assert first is not None
        assert Task.enqueue(Task.GENERATE_DRAFT, "abc") is None
        assert Task.enqueue(Task.GENERATE_DRAFT, "def") is not None
        assert Task.objects.count() == 2

    def test_enqueue_after_finishing(self):
        task = Task.enqueue(Task.GENERATE_DRAFT, "abc")
        task.status = Task.FAILED
        task.save()
        assert task.is_terminated()
        assert Task.enqueue(Task.GENERATE_DRAFT, "abc") is not None
        assert Task.most_recent_run(Task.GENERATE_DRAFT, "abc").status == Task.QUEUED

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            Task.enqueue("reticulate_splines", "abc")

    def test_dequeue_in_order(self):
        first = Task.enqueue(Task.GENERATE_DRAFT, "a")
        second = Task.enqueue(Task.GENERATE_DRAFT, "b")
        assert Task.dequeue() == first
        assert Task.dequeue() == second
        assert Task.dequeue() is None
        first.refresh_from_db()
        assert first.status == Task.RUNNING

    def test_failure_is_recorded(self):
        Task.enqueue(Task.GENERATE_DRAFT, "no-such-draft")
        task = Task.dequeue()
        assert task.execute() == Task.FAILED

        task.refresh_from_db()
        assert task.status == Task.FAILED
        assert "does not exist" in task.error_message
