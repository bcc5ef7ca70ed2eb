"""Server-rendered pages: navigation shell, templates and static assets."""
