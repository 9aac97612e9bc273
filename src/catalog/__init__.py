from src.catalog.repository import AlgebraCatalog, number_of_l_algebras, small_l_algebra

__all__ = ["AlgebraCatalog", "small_l_algebra", "number_of_l_algebras"]
