from codevault.libs.result import Result, Return
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Logout - tokens are stateless and not tracked server-side.

    Always succeeds and never touches the store. The API layer clears the
    access token cookie; the client is expected to drop its tokens.
    """

    async def execute(self) -> Result[LogoutResponse]:
        return Return.ok(LogoutResponse(message="Logged out successfully"))
