"""Login management -- controllers, path variables and login guards.

Demonstrates registration order, regex path variables bound as
positional arguments, and per-route middleware that redirects based on
login state. Sessions are a dict keyed by the ``session`` cookie.

Run with any ASGI server, e.g.:
    uvicorn app:app

Inspect the route table:
    wren routes app:registry
    wren match app:registry GET /products/42/categories/shoes
"""

from wren import App, Dispatcher, DispatchContext, RouteRegistry
from wren.middleware import AuthConfig, MustLoginMiddleware, MustNotLoginMiddleware

SESSIONS: dict[str, str] = {"s3cr3t": "eko"}


def current_user(context: DispatchContext) -> str | None:
    cookie = context.header("cookie") or ""
    for part in cookie.split(";"):
        name, _, value = part.strip().partition("=")
        if name == "session":
            return SESSIONS.get(value)
    return None


class HomeController:
    def index(self) -> str:
        return "<h1>Login Management</h1>"


class UserController:
    def register(self) -> str:
        return "<form>register</form>"

    def login(self) -> str:
        return "<form>login</form>"

    def profile(self) -> str:
        return "<h1>Profile</h1>"


class ProductController:
    def categories(self, product_id: str, category_id: str) -> str:
        return f"Product ID: {product_id}, Category ID: {category_id}"


auth = AuthConfig(current_user=current_user)

registry = RouteRegistry()
registry.add("GET", "/", HomeController, "index")
registry.add("GET", "/users/register", UserController, "register", [MustNotLoginMiddleware(auth)])
registry.add("GET", "/users/login", UserController, "login", [MustNotLoginMiddleware(auth)])
registry.add("GET", "/users/profile", UserController, "profile", [MustLoginMiddleware(auth)])
registry.add(
    "GET",
    "/products/([0-9a-zA-Z]*)/categories/([0-9a-zA-Z]*)",
    ProductController,
    "categories",
)

app = App(Dispatcher(registry))
