class HomeView:
    def render(self, outlet: str = "") -> str:
        return '<section class="view-home"><h1>Welcome</h1></section>'
