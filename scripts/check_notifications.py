"""
Quick helper to show the notification state of applications.

Usage:
  python -m scripts.check_notifications              # counts per notify_status
  python -m scripts.check_notifications <app-id>     # one application
"""
import sys

from core.database import get_application, get_stats


def main():
    if len(sys.argv) < 2:
        stats = get_stats()
        print(f"Active jobs: {stats['active_jobs']}")
        for status, count in sorted(stats["applications"].items()):
            print(f"  {status}: {count}")
        return

    application_id = sys.argv[1]
    row = get_application(application_id)
    if not row:
        print(f"No application found with id {application_id}")
        sys.exit(1)

    print(
        f"  id={row.get('id')} "
        f"job={row.get('job_id')} ({row.get('job_title')}) "
        f"candidate={row.get('email')} "
        f"created={row.get('created_at')}"
    )
    print(
        f"  notify_status={row.get('notify_status')} "
        f"attempts={row.get('notify_attempts')} "
        f"notified_at={row.get('notified_at')} "
        f"error={row.get('notify_error')}"
    )


if __name__ == "__main__":
    main()
