"""
Menu search and filters.

An item is visible when it matches the search term AND has any of the
selected categories AND has any of the selected tags. An empty term or an
empty selection does not narrow the menu.
"""


class MenuFilter:

    def __init__(self, search_term='', categories=None, tags=None):
        self.search_term = normalize_term(search_term)
        self.categories = list(dict.fromkeys(categories or []))
        self.tags = list(dict.fromkeys(tags or []))

    @classmethod
    def from_query(cls, params):
        """Build the filter from ``?q=&category=&tag=`` parameters.

        ``category`` and ``tag`` may repeat or hold comma separated slugs.
        """
        return cls(
            search_term=params.get('q', ''),
            categories=parse_slugs(params.getlist('category')),
            tags=parse_slugs(params.getlist('tag')),
        )

    @property
    def is_active(self):
        return bool(self.search_term or self.categories or self.tags)

    def toggle_category(self, slug):
        self.categories = _toggle(self.categories, slug)

    def toggle_tag(self, slug):
        self.tags = _toggle(self.tags, slug)

    def reset(self):
        self.search_term = ''
        self.categories = []
        self.tags = []

    def matches(self, item):
        if self.search_term and self.search_term not in searchable_text(item):
            return False
        if self.categories and not any(slug in self.categories for slug in item['category_slugs']):
            return False
        if self.tags and not any(slug in self.tags for slug in item['tag_slugs']):
            return False
        return True

    def apply(self, items):
        """Split ``items`` into visible ones and report which category sections keep content."""
        visible = []
        visible_categories = set()

        for item in items:
            if self.matches(item):
                visible.append(item)
                visible_categories.update(slug for slug in item['category_slugs'] if slug)

        return FilterResult(visible, visible_categories)

    def as_dict(self):
        return {'q': self.search_term, 'categories': self.categories, 'tags': self.tags}


class FilterResult:

    def __init__(self, items, categories):
        self.items = items
        self.categories = categories

    @property
    def visible_ids(self):
        return [item['id'] for item in self.items]

    @property
    def count(self):
        return len(self.items)

    @property
    def is_empty(self):
        return not self.items


def normalize_term(term):
    return (term or '').strip().lower()


def parse_slugs(values):
    if isinstance(values, str):
        values = [values]
    slugs = []
    for value in values or []:
        slugs.extend(part.strip() for part in str(value).split(',') if part.strip())
    return list(dict.fromkeys(slugs))


def searchable_text(item):
    """Lower cased text a search term is looked up in"""
    parts = [
        item.get('title', ''),
        item.get('description', ''),
        ' '.join(slug.replace('-', ' ') for slug in item.get('category_slugs', [])),
        ' '.join(slug.replace('-', ' ') for slug in item.get('tag_slugs', [])),
        ' '.join(item.get('diet_labels', [])),
    ]
    return ' '.join(parts).lower()


def _toggle(values, value):
    if value in values:
        return [v for v in values if v != value]
    return values + [value]
