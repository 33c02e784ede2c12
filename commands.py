# Quick reference commands (run from repo root). These are comments only; copy/paste as needed.

# Install the project with test dependencies (includes httpx for TestClient)
# python -m pip install -e ".[test]"

# Run the full test suite (Postgres store tests are skipped unless DATABASE_URL is set)
# python -m pytest

# Run focused test files
# python -m pytest tests/test_feed.py
# python -m pytest tests/test_routing.py tests/test_worker_notify.py
# python -m pytest tests/test_api_jobs.py tests/test_api_applications.py
# python -m pytest tests/test_validation.py tests/test_email_utils.py
# DATABASE_URL=postgresql://... python -m pytest tests/test_stores_pg.py

# Start the API locally (with env vars loaded)
# python -m dotenv run -- python -m uvicorn app.api:app --reload

# Run the notification worker (polls queued applications)
# python -m dotenv run -- python -m worker.main
# RUN_ONCE=true python -m dotenv run -- python main.py

# Seed demo postings and users
# python -m dotenv run -- python -m scripts.seed_jobs --manager-email you@yourdomain.com

# Inspect notification state
# python -m dotenv run -- python -m scripts.check_notifications
# python scripts/db_shell.py "SELECT id, title, status, account_manager, created_by FROM jobs"

# Try the feed
# curl "http://127.0.0.1:8000/api/jobs?lat=25.76&lon=-80.19"
