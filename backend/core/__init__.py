"""
core - 酒店预订服务的领域核心

与 Web 框架和数据库无关，包含：
- domain: 领域实体、校验规则、部分更新合并器、存储接口
- security: 密码哈希与 token 编解码
- services: 酒店/房间登记处与认证服务
- store: 内存存储实现

使用方式:
    >>> from core.store import InMemoryStore
    >>> from core.services import HotelRegistry
    >>> from core.domain import Hotel
    >>> HotelRegistry(InMemoryStore()).add(Hotel(name="Test Hotel")).value.id
    1
"""
