import os
# Production serving of the live blog: gunicorn -c gunicorn.conf.py blog:app
# Every request re-reads the posts from disk, so workers share no state.

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8090")
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNICORN_LOGLEVEL", "info")
proc_name = "markdown_blog"


def post_fork(server, worker):
    # WorkerIdFilter reads this to label log lines from each worker
    os.environ["GUNICORN_WORKER_ID"] = str(worker.age)
    server.log.info(f"Blog worker {worker.age} spawned (pid: {worker.pid})")
