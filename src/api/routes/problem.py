"""API routes for scraping problems."""

from litestar import Controller, Response, get
from litestar.status_codes import HTTP_200_OK, HTTP_500_INTERNAL_SERVER_ERROR
from loguru import logger

from api.schemas.problem import ErrorResponse, ProblemResponse
from domain.models import Failure, Success
from services import ProblemService


class ProblemController(Controller):
    """Controller for problem scraping."""

    path = "/cf"

    @get("/")
    async def get_problem(
        self,
        problem_service: ProblemService,
        id: str | None = None,
        ongoing: str | None = None,
    ) -> Response:
        """
        Scrape a Codeforces problem.

        Query parameters:
        - id: contest number followed by problem letter (e.g., "1850A")
        - ongoing: "true" to read the live contest page instead of the problemset
        """
        logger.debug(f"API request for problem: id={id}, ongoing={ongoing}")

        if not id:
            logger.warning("Problem request without id")
            return _error("Missing required query parameter 'id'", HTTP_500_INTERNAL_SERVER_ERROR)

        try:
            outcome = await problem_service.scrape(id, ongoing == "true")
        except Exception as e:
            logger.exception(f"Unhandled error scraping problem {id}")
            return _error(str(e), HTTP_500_INTERNAL_SERVER_ERROR)

        if isinstance(outcome, Success):
            body = ProblemResponse.model_validate(outcome.record.to_dict())
            return Response(content=body.model_dump(by_alias=True), status_code=HTTP_200_OK)

        if isinstance(outcome, Failure):
            return _error(
                outcome.failure.error,
                outcome.failure.status or HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return _error("Unknown error occurred", HTTP_500_INTERNAL_SERVER_ERROR)


def _error(message: str, status_code: int) -> Response:
    return Response(content=ErrorResponse(error=message).model_dump(), status_code=status_code)
