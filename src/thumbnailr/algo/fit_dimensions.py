"""Pure target-size computation for thumbnails (no image I/O)."""

from ..common.schemas import FitPolicy


def fit_dimensions(
    *,
    width: int,
    height: int,
    original_width: int,
    original_height: int,
    policy: FitPolicy | str = FitPolicy.FIT_LONGEST,
) -> tuple[int, int]:
    """
    Resolve the final thumbnail size for a requested box.

    FIXED returns the box verbatim. FIT_LONGEST scales the source so it
    fits entirely inside the box; FIT_SHORTEST scales it so it covers the
    box. Both keep the source aspect ratio and match the box exactly on
    one side.

    Args:
        width: Requested width
        height: Requested height
        original_width: Width of the decoded source
        original_height: Height of the decoded source
        policy: FitPolicy member or its string value

    Returns:
        (width, height) truncated to whole pixels, never below 1

    Raises:
        InvalidPolicyError: If policy is not a FitPolicy value
        ValueError: If any size is not positive
    """
    policy = FitPolicy.coerce(policy)

    if min(width, height, original_width, original_height) <= 0:
        raise ValueError(
            f"Sizes must be positive, got box {width}x{height} "
            + f"for source {original_width}x{original_height}"
        )

    if policy is FitPolicy.FIXED:
        return width, height

    # Exact rational comparison of width * oh / ow against height
    height_fits = width * original_height <= height * original_width

    if policy is FitPolicy.FIT_LONGEST:
        width_driven = height_fits
    else:
        # On an exact tie the width is recomputed from the height
        width_driven = not height_fits

    if width_driven:
        return width, max(1, width * original_height // original_width)
    return max(1, height * original_width // original_height), height
