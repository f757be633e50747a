"""HTTP blueprints for the cashmoney API."""
