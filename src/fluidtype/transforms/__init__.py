from fluidtype.model.result import Result
from fluidtype.stylesheet.model import Root
from fluidtype.transforms.base import Transform
from fluidtype.transforms.fluid import (
    FluidTypographyOptions,
    FluidTypographyTransform,
    PlannedRewrite,
)


def apply_transforms(root: Root, transforms: list[Transform] | None = None) -> Result:
    """Apply *transforms* (the fluid transform by default) to *root* in order."""
    if transforms is None:
        transforms = [FluidTypographyTransform()]
    result = Result(root=root)
    for t in transforms:
        t.apply(root, result)
    return result


__all__ = [
    "Transform",
    "FluidTypographyOptions",
    "FluidTypographyTransform",
    "PlannedRewrite",
    "apply_transforms",
]
