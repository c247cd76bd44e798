"""Service layer of the campus complaints core."""
