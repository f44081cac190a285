"""stub_server: dispatch mock requests to stub handlers by URI template."""

from typing import Callable, Dict, List, Optional, Tuple

from uri_template_matcher import UriTemplate, configure_logging

BASE_ADDRESS = "http://localhost:9000/app/"

Stub = Callable[..., str]

configure_logging(debug=True)

routes: List[Tuple[UriTemplate, Stub]] = []


def stub(template: str) -> Callable:
    """Register stub for template."""

    def _register(handler: Stub) -> Stub:
        routes.append((UriTemplate(template), handler))
        return handler

    return _register


@stub("/")
def index() -> str:
    """Return plain text."""
    return "Yo"


@stub("/users/{user}")
def user(user: str) -> str:
    """Return user name."""
    return user


@stub("/users/{user}/orders?status=open&page={page}")
def open_orders(user: str, page: str) -> str:
    """Return open orders page."""
    return f"{user}-{page or '1'}"


def dispatch(request_uri: str) -> Optional[str]:
    """Call the first stub whose template matches."""
    for template, handler in routes:
        result = template.is_match(BASE_ADDRESS, request_uri)
        if result:
            kwargs: Dict[str, str] = {name: result[name] for name in result}
            return handler(**kwargs)
    return None


if __name__ == "__main__":
    print(dispatch("http://localhost:9000/app/"))
    print(dispatch("http://localhost:9000/app/Users/ada"))
    print(dispatch("http://localhost:9000/app/users/ada/orders?status=open"))
    print(dispatch("http://localhost:9000/app/users/ada/orders?status=closed"))
