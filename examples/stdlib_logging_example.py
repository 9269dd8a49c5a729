"""Route standard library logging through the Cloud Logging handler.

Run with:
    python examples/stdlib_logging_example.py

Records from any ``logging`` logger (including third-party libraries) are
written in the same JSON format as records from the gcplog facade.
"""

import logging
import sys

import gcplog


def main() -> None:
    handler = gcplog.GCPHandler(gcplog.StreamWriter(sys.stdout), gcplog.Level.INFO)
    handler = handler.with_attrs([gcplog.Attr("component", "worker")])

    root = logging.getLogger()
    root.addHandler(gcplog.GCPLoggingHandler(handler))
    root.setLevel(logging.DEBUG)

    log = logging.getLogger("worker.jobs")
    log.info("job started", extra={"job_id": "j-42"})
    try:
        1 / 0
    except ZeroDivisionError:
        log.exception("job failed")


if __name__ == "__main__":
    main()
