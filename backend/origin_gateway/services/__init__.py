from origin_gateway.services.articles import ArticlesService
from origin_gateway.services.base import OriginService, gather_results
from origin_gateway.services.categories import CategoriesService
from origin_gateway.services.comments import CommentsService
from origin_gateway.services.posts import PostsService
from origin_gateway.services.roles import RolesService

__all__ = [
    "ArticlesService",
    "CategoriesService",
    "CommentsService",
    "OriginService",
    "PostsService",
    "RolesService",
    "gather_results",
]
