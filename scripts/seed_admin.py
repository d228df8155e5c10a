"""
Script para crear el administrador del sistema

Uso:
    python -m scripts.seed_admin

Credenciales tomadas de SEED_ADMIN_EMAIL / SEED_ADMIN_PASSWORD (ver settings).
"""
import sys

from sqlalchemy import func

from barmanager.config.settings import settings
from barmanager.config.database import SessionLocal, init_db
from barmanager.shared.database.models import Company
from barmanager.core.auth.service import AuthService
from barmanager.modules.companies.repository import CompaniesRepository

SYSTEM_CNPJ = "00.000.000/0001-00"


def create_system_admin(db, email: str, password: str):
    """
    Crear la cuenta system_admin si no existe.

    Devuelve (company, created). Falla con ValueError si el CNPJ reservado
    ya pertenece a otra empresa.
    """
    email = email.lower()
    existing = db.query(Company).filter(func.lower(Company.email) == email).first()
    if existing:
        return existing, False

    if CompaniesRepository(db).cnpj_taken(SYSTEM_CNPJ):
        raise ValueError(f"El CNPJ {SYSTEM_CNPJ} ya pertenece a otra empresa")

    admin = Company(
        name="SuperAdmin",
        cnpj=SYSTEM_CNPJ,
        email=email,
        password_hash=AuthService.get_password_hash(password),
        user_type="system_admin",
        is_active=True
    )
    db.add(admin)
    db.commit()
    return admin, True


def seed_admin():
    init_db()
    db = SessionLocal()

    try:
        admin, created = create_system_admin(db, settings.seed_admin_email, settings.seed_admin_password)
        if not created:
            print(f"✅ El administrador ya existe: {admin.email} ({admin.user_type})")
            return

        print("✅ Administrador del sistema creado")
        print(f"   📧 Email: {admin.email}")
        print(f"   🔑 Contraseña: {settings.seed_admin_password}")
        print("   👤 Tipo: system_admin")

    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    except Exception as e:
        db.rollback()
        print(f"❌ Error creando administrador: {e}")
        sys.exit(1)

    finally:
        db.close()

if __name__ == "__main__":
    seed_admin()
