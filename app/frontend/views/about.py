class AboutView:
    def render(self, outlet: str = "") -> str:
        return '<section class="view-about"><h1>About us</h1></section>'
