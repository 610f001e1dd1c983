from hotel_api.tasks.celery_app import celery
from hotel_api.tasks import worker_jobs


@celery.task(name="hotel_api.tasks.jobs.process_email_queue")
def process_email_queue(limit: int = 50):
    return worker_jobs.process_email_queue(limit=limit)
