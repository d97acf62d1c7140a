from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

# Keep metrics module-level singletons
jobs_scheduled_total = Counter("jobs_scheduled_total", "Total jobs submitted to Cloud Tasks")
schedule_errors_total = Counter("schedule_errors_total", "Task submissions rejected by or failed to reach Cloud Tasks")
schedule_latency_seconds = Histogram("schedule_latency_seconds", "Time to submit a task to Cloud Tasks")
request_latency_seconds = Histogram("request_latency_seconds", "HTTP request latency seconds")

# Processor / execution metrics
jobs_executed_total = Counter("jobs_executed_total", "Total jobs executed by workers")
job_failures_total = Counter("job_failures_total", "Jobs whose worker raised during execution")
execution_latency_seconds = Histogram("execution_latency_seconds", "Job execution latency seconds")
rejected_payloads_total = Counter(
    "rejected_payloads_total", "Delivered payloads rejected before execution", ["reason"]
)


def metrics_response():
    # Return prometheus metrics as a Response
    payload = generate_latest()
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)
