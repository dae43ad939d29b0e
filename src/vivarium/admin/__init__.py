# Administration feature (user management).
