"""
Pytest 配置和共享 fixtures
"""
import os

# 必须在导入 app 之前设置
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.database import Base, get_db
from app.models import ontology
from app.security.auth import password_hasher, token_codec
from app.main import app


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== 认证相关 Fixtures ==============

@pytest.fixture
def sample_user(db_session):
    """创建测试用户"""
    user = ontology.User(
        username="alice",
        password=password_hasher.hash("secret123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user_token(sample_user):
    """返回测试用户的 token"""
    return token_codec.issue(sample_user.username)


@pytest.fixture
def auth_headers(user_token):
    """返回带认证的请求头"""
    return {"Authorization": f"Bearer {user_token}"}


# ============== 实体相关 Fixtures ==============

@pytest.fixture
def sample_hotel(db_session):
    """创建测试酒店"""
    hotel = ontology.Hotel(
        name="Test Hotel",
        location="Location",
        phone="1234567890",
        email="test@example.com",
        star_rating=5,
        description="A nice hotel",
        room_count=10,
        facilities="Wi-Fi, Breakfast",
    )
    db_session.add(hotel)
    db_session.commit()
    db_session.refresh(hotel)
    return hotel


@pytest.fixture
def sample_room(db_session, sample_hotel):
    """创建测试房间"""
    room = ontology.Room(
        room_type="Deluxe",
        room_number=101,
        price=Decimal("1500.00"),
        capacity=2,
        available=True,
        facilities="WiFi",
        hotel_id=sample_hotel.id,
    )
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room
