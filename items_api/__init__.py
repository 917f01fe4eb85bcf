"""Items API: CRUD over items plus concurrent bulk processing."""
