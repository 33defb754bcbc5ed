"""Example serializing SQLAlchemy models into a JSON:API document.

Run with:
    python examples/serialize_example.py
"""
from __future__ import annotations

import json
import logging

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_serializer import JSONAPISerializer, ResourceConfig

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    articles = relationship("Article")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    comments = relationship("Comment")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))


comment_config = ResourceConfig(type="comments")
article_config = ResourceConfig(
    type="articles",
    allow=["title"],
    relationships={"comments": comment_config},
    links_for=lambda article: {"self": f"/articles/{article['id']}"},
)
user_config = ResourceConfig(
    type="users",
    deny=["email"],
    relationships={"articles": article_config},
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    users = [
        User(
            id=1,
            name="Ada",
            email="ada@example.com",
            articles=[
                Article(id=10, title="Engines", body="...", comments=[Comment(id=100, body="Nice")]),
                Article(id=11, title="Notes", body="..."),
            ],
        ),
        User(id=2, name="Alan", email="alan@example.com", articles=[]),
    ]
    document = JSONAPISerializer(user_config).serialize(users, meta={"total": len(users)})
    print(json.dumps(document, indent=2))


if __name__ == "__main__":
    main()
