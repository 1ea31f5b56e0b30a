"""Admin shell: sidebar navigation around the admin views."""

from app.core.config import settings


class AdminLayout:
    title = "Admin"

    def render(self, outlet: str = "") -> str:
        return (
            "<!DOCTYPE html>"
            f"<html><head><title>{settings.PROJECT_NAME} · {self.title}</title></head>"
            '<body class="layout-admin">'
            '<nav class="admin-sidebar"><a href="/admin">Dashboard</a> <a href="/">Back to shop</a></nav>'
            f"<main>{outlet}</main>"
            "</body></html>"
        )
