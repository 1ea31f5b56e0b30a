class AdminHomeView:
    def render(self, outlet: str = "") -> str:
        return '<section class="view-admin-home"><h1>Admin dashboard</h1></section>'
