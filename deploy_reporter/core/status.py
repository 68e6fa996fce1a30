"""Deployment state and description resolution."""

AUTO = "auto"

# Build status value the CI runner reports for a passing build
BUILD_STATUS_SUCCESS = "0"


def resolve_state(preset: str, build_status: str | None) -> str:
    """Resolve the deployment state.

    Any preset other than "auto" is returned unchanged. "auto" follows the
    build status: "0" is a success, anything else (including unset) a failure.
    """
    if preset != AUTO:
        return preset
    if build_status == BUILD_STATUS_SUCCESS:
        return "success"
    return "failure"


def resolve_description(
    description: str, preset: str, build_status: str | None
) -> str:
    """Return the description, or the title-cased state when it is empty."""
    if description:
        return description
    return resolve_state(preset, build_status).title()
