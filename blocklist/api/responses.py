"""Turn batch results into HTTP status codes and response bodies."""

from fastapi import status

from blocklist.domain.batch import BatchOperation, BatchResult, ItemOutcome, OutcomeKind
from blocklist.schemas.response import ERROR, PARTIAL, SUCCESS, ApiResponse

# Status code of a single failed item, by outcome kind.
OUTCOME_STATUS_CODES = {
    OutcomeKind.CONFLICT: status.HTTP_409_CONFLICT,
    OutcomeKind.MISSING: status.HTTP_404_NOT_FOUND,
}

OUTCOME_MESSAGES = {
    OutcomeKind.CONFLICT: 'Domain "{name}" ({index} in the array) is already in the database.',
    OutcomeKind.MISSING: 'Domain "{name}" ({index} in the array) isn\'t in the database.',
}

# (success code, all-failed code) per operation.
BATCH_STATUS_CODES = {
    BatchOperation.INSERT: (status.HTTP_201_CREATED, status.HTTP_409_CONFLICT),
    BatchOperation.DELETE: (status.HTTP_200_OK, status.HTTP_404_NOT_FOUND),
}

BATCH_MESSAGES = {
    BatchOperation.INSERT: {
        SUCCESS: "Successfully created all of the domains.",
        PARTIAL: "Some of the domains are already in the database.",
        ERROR: "All of the domains are already in the database.",
    },
    BatchOperation.DELETE: {
        SUCCESS: "Successfully removed all of the specified domains.",
        PARTIAL: "Some of the domains aren't in the database.",
        ERROR: "All of the domains aren't in the database.",
    },
}


def describe_failure(outcome: ItemOutcome) -> ApiResponse:
    return ApiResponse(
        status=ERROR,
        status_code=OUTCOME_STATUS_CODES[outcome.kind],
        message=OUTCOME_MESSAGES[outcome.kind].format(
            name=outcome.name, index=outcome.index
        ),
    )


def classify_batch(result: BatchResult) -> tuple[int, ApiResponse]:
    """
    Pick the status code and body for a committed batch.

    - Every item failed: "error" with the conflict/not-found code
    - No item failed: "success" with the created/ok code
    - Otherwise: "partial" with the success code and one entry per failure
    """
    success_code, failure_code = BATCH_STATUS_CODES[result.operation]
    messages = BATCH_MESSAGES[result.operation]

    if result.all_failed:
        return failure_code, ApiResponse(
            status=ERROR, status_code=failure_code, message=messages[ERROR]
        )
    if result.all_applied:
        return success_code, ApiResponse(
            status=SUCCESS, status_code=success_code, message=messages[SUCCESS]
        )
    return success_code, ApiResponse(
        status=PARTIAL,
        status_code=success_code,
        message=messages[PARTIAL],
        additional_errors=[describe_failure(o) for o in result.failed],
    )
