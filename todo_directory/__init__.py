"""Task, user and group directory backend."""
