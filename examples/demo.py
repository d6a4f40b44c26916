"""Demo script: generate a solid, check a drawing and render it with matplotlib."""

import json
from pathlib import Path

from orthovox import (
    RotationState,
    Tier,
    generate_shape,
    incorrect_views,
    project,
    render_mpl,
    render_projections_mpl,
    render_view,
    tutor_payload,
)

OUTPUT_DIR = Path(__file__).resolve().parent


def main():
    solid = generate_shape(Tier.INTERMEDIATE, rng=2024)
    if not solid:
        print(solid.message)
        return
    print(f"Generated solid: {solid.count} blocks, dimensions {tuple(solid.dimensions())}")

    views = project(solid)
    for view, sil in views.items():
        print(f"{view.value:>5}: {sil.count} cells, offset {tuple(sil.offset)}")

    # A learner who drew only the top view, shifted one column to the left.
    drawings = {"top": [row[1:] for row in views.top.to_nested()]}
    print(f"Incorrect views: {[v.value for v in incorrect_views(drawings, views)]}")
    print(json.dumps(tutor_payload(solid, views, drawings)["incorrect_views"]))

    state = RotationState().for_solid(solid)
    state = state.begin_drag(0.0, 0.0).drag_to(60.0, 0.0).end_drag()
    polygons, state = render_view(solid, state)
    print(f"{len(polygons)} faces visible at yaw {state.rotation_y:.2f} rad")

    render_mpl(solid, OUTPUT_DIR / "solid.png", rotation_y=state.rotation_y, show=False)
    render_projections_mpl(views, OUTPUT_DIR / "views.png", show=False)
    print(f"Rendered to {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
