from quiz_catalog.db.models.categories import Category
from quiz_catalog.db.models.options import Option
from quiz_catalog.db.models.questions import Question

__all__ = [
    "Category",
    "Option",
    "Question",
]
