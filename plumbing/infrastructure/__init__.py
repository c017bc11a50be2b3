"""Infrastructure: settings, database, ORM models, media storage and logging."""
