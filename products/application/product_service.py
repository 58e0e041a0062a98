"""
商品应用服务。
处理商品相关的应用层逻辑: 验证 -> 查找关联 -> 映射 -> 持久化 -> 映射结果。
预期内的失败(验证失败、实体不存在)以ServiceResult返回，存储异常向上抛出。
"""
from dataclasses import fields
from typing import Any, Dict, Iterable, List, Optional

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
    CreateProductDTO,
    DeleteProductDTO,
    ProductSearchDTO,
    UpdateProductDTO,
)
from products.application.mappers import (
    apply_update_dto,
    create_dto_to_product,
    product_to_dto,
    update_dto_to_product,
)
from products.domain import config
from products.domain.entities import Category, Product

PRODUCT_FIELDS = frozenset(field.name for field in fields(Product))


def is_valid_string(value: Any) -> bool:
    """字符串非空且去除首尾空白后不为空"""
    return isinstance(value, str) and value.strip() != ""


def failure_from(exc: Exception) -> ServiceResult:
    """
    将预期内的领域异常转换为失败结果。

    Args:
        exc: 验证异常或实体未找到异常

    Returns:
        失败结果
    """
    if isinstance(exc, ValidationException):
        return ServiceResult.fail(MessageConstants.INVALID_STRING, StatusCode.VALIDATION_ERROR)
    if isinstance(exc, EntityNotFoundException):
        return ServiceResult.fail(MessageConstants.ERROR, StatusCode.ENTITY_NOT_FOUND)
    return ServiceResult.fail(MessageConstants.ERROR, StatusCode.BAD_REQUEST)


def build_sort_keys(order_by: Optional[str], allowed: Iterable[str]) -> List[str]:
    """
    解析排序参数，例如 "-price,name"。

    Args:
        order_by: 逗号分隔的排序字段，前缀"-"表示降序
        allowed: 允许排序的字段名

    Returns:
        排序字段列表

    Raises:
        ValidationException: 排序字段不存在时抛出
    """
    if not order_by:
        return []
    allowed = set(allowed)
    keys = [key.strip() for key in order_by.split(',') if key.strip()]
    for key in keys:
        if key.lstrip('-') not in allowed:
            raise ValidationException('order_by', f"不支持的排序字段: {key}")
    return keys


class ProductService:
    """
    商品应用服务。
    仓储和工作单元由调用方显式传入，同一请求内共享一个工作单元。
    """

    def __init__(
        self,
        category_repository: Repository[Category],
        product_repository: Repository[Product],
        unit_of_work: UnitOfWork
    ):
        """
        初始化商品应用服务。

        Args:
            category_repository: 分类仓储
            product_repository: 商品仓储
            unit_of_work: 工作单元
        """
        self.category_repository = category_repository
        self.product_repository = product_repository
        self.unit_of_work = unit_of_work

    def _validate_strings(self, name: Optional[str], description: Optional[str]) -> None:
        if not is_valid_string(name):
            raise ValidationException('name', "不能为空")
        if not is_valid_string(description):
            raise ValidationException('description', "不能为空")

    def _get_live_category(self, category_id: Any) -> Category:
        """
        获取未删除的分类。

        Args:
            category_id: 分类ID

        Returns:
            分类实体

        Raises:
            EntityNotFoundException: 分类不存在或已删除时抛出
        """
        category = self.category_repository.find(category_id)
        if category is None or category.is_deleted:
            raise EntityNotFoundException("分类", category_id)
        return category

    def _get_live_product(self, product_id: Any) -> Product:
        product = self.product_repository.find(product_id)
        if product is None or product.is_deleted:
            raise EntityNotFoundException("商品", product_id)
        return product

    def _category_names(self, products: Iterable[Product]) -> Dict[Any, Optional[str]]:
        """批量获取商品对应的分类名称，每个分类只查询一次"""
        names: Dict[Any, Optional[str]] = {}
        for product in products:
            if product.category_id not in names:
                category = self.category_repository.find(product.category_id)
                names[product.category_id] = category.name if category else None
        return names

    # ==================== 命令处理方法 ====================

    def create(self, dto: CreateProductDTO) -> ServiceResult:
        """
        创建商品。

        Args:
            dto: 商品创建DTO

        Returns:
            包含新商品DTO的结果；名称或描述为空时返回INVALID_STRING，分类不存在时返回ERROR

        Raises:
            StorageException: 提交失败时抛出
        """
        try:
            self._validate_strings(dto.name, dto.description)
            product = create_dto_to_product(dto)
            category = self._get_live_category(dto.category_id)

            self.product_repository.add(product)
            self.unit_of_work.commit()

            logger.info(f"商品已创建: {product.id} ({product.name})")
            return ServiceResult.success(
                product_to_dto(product, category.name),
                MessageConstants.CREATE_SUCCESS,
                StatusCode.CREATED
            )
        except (ValidationException, EntityNotFoundException) as e:
            logger.warning(f"创建商品失败: {e}")
            return failure_from(e)
        except StorageException as e:
            logger.error(f"创建商品失败: {e}")
            raise

    def update(self, dto: UpdateProductDTO) -> ServiceResult:
        """
        更新商品。
        验证和分类校验与创建相同，商品本身也必须存在且未删除。

        Args:
            dto: 商品更新DTO

        Returns:
            包含更新后商品DTO的结果

        Raises:
            StorageException: 提交失败时抛出
        """
        try:
            self._validate_strings(dto.name, dto.description)
            category = self._get_live_category(dto.category_id)
            product = apply_update_dto(dto, self._get_live_product(dto.id))

            self.product_repository.update(product)
            self.unit_of_work.commit()

            logger.info(f"商品已更新: {product.id}")
            return ServiceResult.success(
                product_to_dto(product, category.name),
                MessageConstants.UPDATE_SUCCESS,
                StatusCode.UPDATED
            )
        except (ValidationException, EntityNotFoundException) as e:
            logger.warning(f"更新商品失败: {e}")
            return failure_from(e)
        except StorageException as e:
            logger.error(f"更新商品失败: {e}")
            raise

    def delete(self, dto: DeleteProductDTO) -> ServiceResult:
        """
        删除商品(软删除)。

        Args:
            dto: 商品删除DTO

        Returns:
            包含被删除商品DTO的结果；商品不存在或已删除时返回ERROR

        Raises:
            StorageException: 提交失败时抛出
        """
        try:
            product = self._get_live_product(dto.id)

            self.product_repository.remove(product)
            self.unit_of_work.commit()

            logger.info(f"商品已删除: {product.id}")
            names = self._category_names([product])
            return ServiceResult.success(
                product_to_dto(product, names[product.category_id]),
                MessageConstants.DELETE_SUCCESS,
                StatusCode.DELETED
            )
        except EntityNotFoundException as e:
            logger.warning(f"删除商品失败: {e}")
            return failure_from(e)
        except StorageException as e:
            logger.error(f"删除商品失败: {e}")
            raise

    def update_count(self, dto: UpdateProductDTO, delta: int) -> ServiceResult:
        """
        调整销量。
        把DTO映射为临时实体并累加销量，新销量写回DTO。
        此方法不提交工作单元，持久化由调用方决定。

        Args:
            dto: 商品更新DTO
            delta: 销量增量

        Returns:
            包含调整后商品DTO的结果
        """
        product = update_dto_to_product(dto)
        product.sale_count += delta
        dto.sale_count = product.sale_count
        logger.debug(f"商品销量调整: {product.id} -> {product.sale_count}")
        return ServiceResult.success(
            product_to_dto(product),
            MessageConstants.UPDATE_SUCCESS,
            StatusCode.UPDATED
        )

    # ==================== 查询处理方法 ====================

    def get_by_id(self, id: Any) -> ServiceResult:
        """
        获取单个未删除的商品。

        Args:
            id: 商品ID

        Returns:
            包含商品DTO的结果；商品或其分类不存在时返回ERROR
        """
        try:
            product = self.product_repository.queryable().filter(id=id, is_deleted=False).first()
            if product is None:
                raise EntityNotFoundException("商品", id)
            category = self._get_live_category(product.category_id)
            return ServiceResult.success(product_to_dto(product, category.name))
        except EntityNotFoundException as e:
            logger.warning(f"获取商品失败: {e}")
            return failure_from(e)

    def get_by_category(self, category_id: Any) -> ServiceResult:
        """
        获取分类下所有未删除的商品，没有商品时返回空列表。

        Args:
            category_id: 分类ID

        Returns:
            包含商品DTO列表的结果
        """
        products = self.product_repository.queryable().filter(
            category_id=category_id,
            is_deleted=False
        ).to_list()
        names = self._category_names(products)
        return ServiceResult.success([
            product_to_dto(product, names[product.category_id]) for product in products
        ])

    def search_pagination(self, dto: Optional[SearchPaginationDTO[ProductSearchDTO]]) -> ServiceResult:
        """
        分页搜索商品。
        只应用已填写的搜索字段，不传排序时不追加排序。

        Args:
            dto: 分页搜索请求，为None时视为调用方错误

        Returns:
            包含PaginatedList[ProductDTO]的结果
        """
        if dto is None:
            logger.warning("分页搜索商品失败: 搜索条件为空")
            return ServiceResult.fail(MessageConstants.ERROR, StatusCode.BAD_REQUEST)

        page_size = dto.page_size if dto.page_size is not None else config.default_page_size()
        if dto.page_index < 0 or page_size <= 0 or page_size > config.max_page_size():
            logger.warning(f"分页搜索商品失败: 分页参数无效 page_index={dto.page_index}, page_size={page_size}")
            return ServiceResult.fail(MessageConstants.INVALID_PAGINATION, StatusCode.PARAM_ERROR)

        try:
            sort_keys = build_sort_keys(dto.order_by, PRODUCT_FIELDS)
        except ValidationException as e:
            logger.warning(f"分页搜索商品失败: {e}")
            return ServiceResult.fail(MessageConstants.INVALID_PAGINATION, StatusCode.PARAM_ERROR)

        query = self.product_repository.queryable().filter(is_deleted=False)
        search = dto.search
        if search is not None:
            if search.name:
                query = query.filter(name__icontains=search.name)
            if search.description:
                query = query.filter(description__icontains=search.description)
            if search.category_id is not None:
                query = query.filter(category_id=search.category_id)
            if search.is_active is not None:
                query = query.filter(is_active=search.is_active)
            if search.is_featured is not None:
                query = query.filter(is_featured=search.is_featured)
        if sort_keys:
            query = query.order_by(*sort_keys)

        page = PaginatedList.create(query, dto.page_index, page_size)
        names = self._category_names(page.items)
        return ServiceResult.success(
            page.map(lambda product: product_to_dto(product, names[product.category_id]))
        )
