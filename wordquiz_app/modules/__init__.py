"""Feature modules (blueprints, services and pure logic)."""
