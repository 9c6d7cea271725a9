"""Demo handlers for the interface layer.

Each handler runs one pattern's example against a wired ``Application`` and
returns a JSON-friendly dictionary. Failures the example provokes on purpose
are reported inside the result; any other failure propagates to the error
middleware.
"""
import io
from typing import Any, Callable, Dict

from patterns_demo.application.actions.adapters import CommandAdapter, ControllerAdapter, JobAdapter
from patterns_demo.application.order.resources import (
    OrderDetailResource,
    OrderResource,
    to_collection_view,
    to_view,
)
from patterns_demo.bootstrap import Application
from patterns_demo.domain.base.exceptions import EntityNotFoundError, ValidationError
from patterns_demo.domain.delivery.value_objects import Address
from patterns_demo.domain.user.user_aggregate import User


def handle_repository_demo(app: Application) -> Dict[str, Any]:
    """CRUD and the fulfilled filter through the repository contract."""
    service = app.order_service
    first = service.place_order("Alice", {"item": "widget"})
    second = service.place_order("Bob", {"item": "gadget", "quantity": 3})
    third = service.place_order("Alice", {"item": "sprocket"})

    service.fulfill_order(first.id)
    service.amend_order(second.id, {"details": {"quantity": 5}})
    service.cancel_order(third.id)

    try:
        service.get_order(third.id)
        missing: Dict[str, Any] = {}
    except EntityNotFoundError as e:
        missing = app.exception_handler.handle_error(e).to_dict()

    return {
        "orders": [to_view(order, OrderDetailResource) for order in service.list_orders()],
        "fulfilled": [order.id for order in service.fulfilled_orders()],
        "summary": service.summary(),
        "deleted_lookup": missing,
    }


def handle_resource_demo(app: Application) -> Dict[str, Any]:
    """Summary, detail and paginated collection views of the same orders."""
    service = app.order_service
    orders = [
        service.place_order("Alice", {"item": "widget"}),
        service.place_order("Bob", {"item": "gadget", "quantity": 2}),
        service.place_order("Carol", {"item": "sprocket"}),
    ]
    service.fulfill_order(orders[0].id)
    first = service.get_order(orders[0].id)

    return {
        "summary": to_view(first, OrderResource),
        "detail": OrderDetailResource(first).additional({"version": app.config.version}).to_response(),
        "collection": to_collection_view(service.list_orders(), page=1, per_page=2, now=app.clock()),
    }


def handle_factory_demo(app: Application) -> Dict[str, Any]:
    """Cars from the car factory and rendered views from the view factory."""
    car = app.car_factory.make({"battery": "lithium-ion", "motor": "dual", "wheels": "19in"})
    order = app.order_service.place_order("Alice", {"car": "model-e", "colour": "red"})

    try:
        app.view_factory.make("orders.invoice", {"order": order})
        missing: Dict[str, Any] = {}
    except EntityNotFoundError as e:
        missing = app.exception_handler.handle_error(e).to_dict()

    return {
        "car": car.to_dict(),
        "views": {
            "cars.spec": app.view_factory.make("cars.spec", {"components": dict(car.components)}).render(),
            "orders.summary": app.view_factory.make("orders.summary", {"order": order}).render(),
        },
        "missing_view": missing,
    }


def handle_strategy_demo(app: Application) -> Dict[str, Any]:
    """Every configured delivery strategy quoting the same addresses."""
    addresses = [
        Address("Rotterdam, NL", distance_km=850),
        Address("Yokohama, JP", distance_km=9300),
    ]
    quotes = []
    for address in addresses:
        for name, strategy in app.delivery_strategies.items():
            quote = app.car_delivery.deliver_car(strategy, address)
            quotes.append({"destination": str(address), **quote.to_dict()})
    return {"default_strategy": app.config.delivery.default_strategy, "quotes": quotes}


def handle_action_demo(app: Application) -> Dict[str, Any]:
    """The password update action run directly, as a controller, as a command and as a job."""
    action = app.update_user_password
    hasher = app.password_hasher
    users = app.user_store
    users.add(User(name="alice", password_hash=hasher.hash("initial-password")))
    steps = []

    action.handle(users.get_by_name("alice"), "direct-password")
    steps.append({"via": "direct", "status": "Password updated."})

    controller = ControllerAdapter(action)
    try:
        controller({"username": "alice", "current_password": "wrong-password",
                    "password": "controller-password", "password_confirmation": "controller-password"})
    except ValidationError as e:
        error = app.exception_handler.handle_error(e).to_dict()
        steps.append({"via": "controller", "status": "rejected", "error": error})
    response = controller({"username": "alice", "current_password": "direct-password",
                           "password": "controller-password", "password_confirmation": "controller-password"})
    steps.append({"via": "controller", "status": response.message})

    output = io.StringIO()
    CommandAdapter(action, stdout=output)(["alice", "command-password"])
    steps.append({"via": "command", "status": output.getvalue().strip()})

    JobAdapter(action, app.job_queue).dispatch(user=users.get_by_name("alice"), new_password="queued-password")
    for result in app.job_queue.run_pending():
        steps.append({"via": "job", "status": result.status})

    final = users.get_by_name("alice")
    return {
        "steps": steps,
        "hash_method": final.password_hash.split("$", 1)[0],
        "verifies_latest_password": hasher.verify(final.password_hash, "queued-password"),
    }


DEMOS: Dict[str, Callable[[Application], Dict[str, Any]]] = {
    "repository": handle_repository_demo,
    "resource": handle_resource_demo,
    "factory": handle_factory_demo,
    "strategy": handle_strategy_demo,
    "action": handle_action_demo,
}


def run_demo(name: str, app: Application) -> Dict[str, Any]:
    """Run one demo behind the application's error middleware."""
    handler = DEMOS.get(name)
    if handler is None:
        raise ValidationError(f"Unknown demo '{name}'", {"demo": [f"Expected one of {sorted(DEMOS)}"]})
    return app.error_middleware.wrap_handler(handler)(app)
