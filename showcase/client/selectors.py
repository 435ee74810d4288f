"""Derived data the views render from a `ViewState`."""

PLACEHOLDER_IMAGE_BASE = "https://picsum.photos"
ROW_IMAGE_SIZE = (400, 225)
DETAIL_IMAGE_SIZE = (1200, 675)

PROJECT_ROWS = (
    ("Featured Projects", "Featured"),
    ("Web Applications", "Web"),
    ("Creative Works", "Creative"),
)


def placeholder_image_url(item_id, width, height):
    return f"{PLACEHOLDER_IMAGE_BASE}/seed/{item_id}/{width}/{height}"


def image_for(item, size=ROW_IMAGE_SIZE):
    """The item's own image, or a placeholder seeded by its id when it has none."""
    return item.get('image_url') or placeholder_image_url(item.get('id'), *size)


def project_rows(projects):
    # Projects in any other category appear in no row.
    return [
        (title, [p for p in projects if p.get('category') == category])
        for title, category in PROJECT_ROWS
    ]


def resume_sections(entries):
    return {
        'experience': [e for e in entries if e.get('type') == 'experience'],
        'education': [e for e in entries if e.get('type') == 'education'],
    }


def shows_project_rows(active_profile):
    return active_profile in (None, 'Projects')


def avatar_initial(active_profile):
    return active_profile[0] if active_profile else 'U'


def category_label(item):
    return item.get('category') or 'Portfolio'
