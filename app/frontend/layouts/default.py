"""Storefront shell shared by the public pages."""

from app.core.config import settings


class DefaultLayout:
    def render(self, outlet: str = "") -> str:
        return (
            "<!DOCTYPE html>"
            f"<html><head><title>{settings.PROJECT_NAME}</title></head>"
            '<body class="layout-default">'
            '<header><a href="/">Home</a> <a href="/about">About</a></header>'
            f"<main>{outlet}</main>"
            "</body></html>"
        )
