"""Error taxonomy shared by services, repository and the HTTP layer.

Each error maps to exactly one HTTP status (see ``status_code``):

- InvalidArgumentError: non-positive ids, missing required fields, malformed
  duration/time strings (400)
- NotFoundError: training, exercise entry or template absent (404)
- ForbiddenError: caller does not own the training (403)
- UnauthorizedError: bearer token missing or rejected by the auth service (401)
- ConflictError: transition not allowed in the current state (409)
- InternalError: persistence or transport failure (500)
"""


class TrainingServiceError(Exception):
    """Base for every error raised by the trainings core."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(TrainingServiceError, ValueError):
    """Input rejected before touching storage.

    Also a ValueError so pydantic validators can raise it directly.
    """

    status_code = 400


class NotFoundError(TrainingServiceError):
    status_code = 404


class UnauthorizedError(TrainingServiceError):
    """Message is a short machine code: no_bearer, auth_unavailable, invalid_token, bad_auth_response."""

    status_code = 401


class ForbiddenError(TrainingServiceError):
    status_code = 403


class ConflictError(TrainingServiceError):
    status_code = 409


class InternalError(TrainingServiceError):
    status_code = 500


# Messages reused across services and tests
TRAINING_NOT_FOUND = "training not found"
EXERCISE_NOT_FOUND = "trained exercise not found"
GLOBAL_TRAINING_NOT_FOUND = "global training not found"
TRAINING_NOT_ACTIVE = "training is not active"
TRAINING_ALREADY_DONE = "training is already done"
NOT_TRAINING_OWNER = "training does not belong to user"
