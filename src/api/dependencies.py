from litestar.datastructures import State

from services import ProblemService, create_problem_service


def provide_problem_service(state: State) -> ProblemService:
    """Create a problem service for the request from the app's settings."""
    return create_problem_service(state.get("settings"))
