"""Hotel rooms: embedded SQLite persistence, migrations and room/user queries."""
