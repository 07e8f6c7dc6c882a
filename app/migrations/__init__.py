# Database migrations package
#
# Migration files are numbered sequentially:
#   001_add_event_data_column.py
#   002_create_user_contacts.py
#
# Each migration file has a run_migration() function and is executed on
# its own; it exits with status 1 on failure.
#
# DATABASE_URL must be set (environment or .env).
#
# To run a migration:
#   python app/migrations/001_add_event_data_column.py
