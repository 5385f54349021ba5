from quiz_catalog.db.repo.categories_repo import CategoriesRepo
from quiz_catalog.db.repo.options_repo import OptionsRepo
from quiz_catalog.db.repo.questions_repo import QuestionsRepo

__all__ = [
    "CategoriesRepo",
    "OptionsRepo",
    "QuestionsRepo",
]
