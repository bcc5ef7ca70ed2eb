"""Infrastructure layer: HTTP clients, web app, templates."""
