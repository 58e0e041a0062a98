"""
分类应用服务。
与商品服务遵循相同的结果约定。
"""
from dataclasses import fields
from typing import Any, Optional

from loguru import logger

from core.application import MessageConstants, ServiceResult, StatusCode
from core.domain import (
    EntityNotFoundException,
    PaginatedList,
    Repository,
    SearchPaginationDTO,
    StorageException,
    UnitOfWork,
    ValidationException,
)
from products.application.dtos import (
    CategorySearchDTO,
    CreateCategoryDTO,
    DeleteCategoryDTO,
    UpdateCategoryDTO,
)
from products.application.mappers import (
    apply_update_category_dto,
    category_to_dto,
    create_dto_to_category,
)
from products.application.product_service import build_sort_keys, failure_from, is_valid_string
from products.domain import config
from products.domain.entities import Category

CATEGORY_FIELDS = frozenset(field.name for field in fields(Category))


class CategoryService:
    """分类应用服务"""

    def __init__(self, category_repository: Repository[Category], unit_of_work: UnitOfWork):
        self.category_repository = category_repository
        self.unit_of_work = unit_of_work

    def _get_live_category(self, category_id: Any) -> Category:
        category = self.category_repository.find(category_id)
        if category is None or category.is_deleted:
            raise EntityNotFoundException("分类", category_id)
        return category

    # ==================== 命令处理方法 ====================

    def create(self, dto: CreateCategoryDTO) -> ServiceResult:
        """
        创建分类。

        Args:
            dto: 分类创建DTO

        Returns:
            包含新分类DTO的结果；名称为空时返回INVALID_STRING
        """
        try:
            if not is_valid_string(dto.name):
                raise ValidationException('name', "不能为空")
            category = create_dto_to_category(dto)

            self.category_repository.add(category)
            self.unit_of_work.commit()

            logger.info(f"分类已创建: {category.id} ({category.name})")
            return ServiceResult.success(
                category_to_dto(category),
                MessageConstants.CREATE_SUCCESS,
                StatusCode.CREATED
            )
        except ValidationException as e:
            logger.warning(f"创建分类失败: {e}")
            return failure_from(e)
        except StorageException as e:
            logger.error(f"创建分类失败: {e}")
            raise

    def update(self, dto: UpdateCategoryDTO) -> ServiceResult:
        """
        更新分类，分类必须存在且未删除。

        Args:
            dto: 分类更新DTO

        Returns:
            包含更新后分类DTO的结果
        """
        try:
            if not is_valid_string(dto.name):
                raise ValidationException('name', "不能为空")
            category = apply_update_category_dto(dto, self._get_live_category(dto.id))

            self.category_repository.update(category)
            self.unit_of_work.commit()

            logger.info(f"分类已更新: {category.id}")
            return ServiceResult.success(
                category_to_dto(category),
                MessageConstants.UPDATE_SUCCESS,
                StatusCode.UPDATED
            )
        except (ValidationException, EntityNotFoundException) as e:
            logger.warning(f"更新分类失败: {e}")
            return failure_from(e)
        except StorageException as e:
            logger.error(f"更新分类失败: {e}")
            raise

    def delete(self, dto: DeleteCategoryDTO) -> ServiceResult:
        """
        删除分类(软删除)。分类下的商品不受影响，但之后无法再关联到该分类。

        Args:
            dto: 分类删除DTO

        Returns:
            包含被删除分类DTO的结果
        """
        try:
            category = self._get_live_category(dto.id)

            self.category_repository.remove(category)
            self.unit_of_work.commit()

            logger.info(f"分类已删除: {category.id}")
            return ServiceResult.success(
                category_to_dto(category),
                MessageConstants.DELETE_SUCCESS,
                StatusCode.DELETED
            )
        except EntityNotFoundException as e:
            logger.warning(f"删除分类失败: {e}")
            return failure_from(e)
        except StorageException as e:
            logger.error(f"删除分类失败: {e}")
            raise

    # ==================== 查询处理方法 ====================

    def get_by_id(self, id: Any) -> ServiceResult:
        try:
            category = self._get_live_category(id)
            return ServiceResult.success(category_to_dto(category))
        except EntityNotFoundException as e:
            logger.warning(f"获取分类失败: {e}")
            return failure_from(e)

    def get_all(self) -> ServiceResult:
        """获取所有未删除的分类，按名称排序"""
        categories = self.category_repository.queryable().filter(is_deleted=False).order_by('name')
        return ServiceResult.success([category_to_dto(category) for category in categories])

    def search_pagination(self, dto: Optional[SearchPaginationDTO[CategorySearchDTO]]) -> ServiceResult:
        """
        分页搜索分类。

        Args:
            dto: 分页搜索请求

        Returns:
            包含PaginatedList[CategoryDTO]的结果
        """
        if dto is None:
            logger.warning("分页搜索分类失败: 搜索条件为空")
            return ServiceResult.fail(MessageConstants.ERROR, StatusCode.BAD_REQUEST)

        page_size = dto.page_size if dto.page_size is not None else config.default_page_size()
        if dto.page_index < 0 or page_size <= 0 or page_size > config.max_page_size():
            logger.warning(f"分页搜索分类失败: 分页参数无效 page_index={dto.page_index}, page_size={page_size}")
            return ServiceResult.fail(MessageConstants.INVALID_PAGINATION, StatusCode.PARAM_ERROR)

        try:
            sort_keys = build_sort_keys(dto.order_by, CATEGORY_FIELDS)
        except ValidationException as e:
            logger.warning(f"分页搜索分类失败: {e}")
            return ServiceResult.fail(MessageConstants.INVALID_PAGINATION, StatusCode.PARAM_ERROR)

        query = self.category_repository.queryable().filter(is_deleted=False)
        if dto.search is not None:
            if dto.search.name:
                query = query.filter(name__icontains=dto.search.name)
            if dto.search.is_active is not None:
                query = query.filter(is_active=dto.search.is_active)
        if sort_keys:
            query = query.order_by(*sort_keys)

        return ServiceResult.success(
            PaginatedList.create(query, dto.page_index, page_size).map(category_to_dto)
        )
