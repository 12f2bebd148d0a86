# withapp/shared/models/Account.py
"""
Modèles liés à l'identité.

Stratégie de découpage :
- Account : données d'authentification (email + hash). Créé par auth/, jamais exposé.
- Profile : identité communautaire (pseudo, affiliation, admin). 1:1 avec Account
            une fois provisionné, c'est la racine que référencent votes,
            notifications et posts.

Note sur signup_nickname :
  Pseudo saisi à l'inscription, conservé sur l'Account pour pouvoir
  (re)provisionner le Profile à la connexion si la création avait échoué.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from withapp.core.database import Base


class Account(Base):
    __tablename__ = "accounts"

    id              = Column(Integer, primary_key=True, index=True)
    email           = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    signup_nickname = Column(String, nullable=True)
    is_active       = Column(Boolean, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Account id={self.id} email={self.email}>"


class Profile(Base):
    __tablename__ = "profiles"

    id          = Column(Integer, primary_key=True, index=True)
    account_id  = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), unique=True, nullable=False)
    email       = Column(String, unique=True, nullable=False)
    nickname    = Column(String, nullable=False)
    affiliation = Column(String, nullable=False, index=True)
    is_admin    = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("affiliation", "nickname", name="uq_profiles_affiliation_nickname"),
    )

    def __repr__(self):
        return f"<Profile id={self.id} nickname={self.nickname} admin={self.is_admin}>"
