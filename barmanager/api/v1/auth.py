from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from barmanager.config.database import get_db
from barmanager.core.auth.actors import Actor, actor_from_company
from barmanager.core.auth.service import AuthService
from barmanager.core.auth.schemas import UserLogin, CompanyRegister, TokenResponse, ActorProfile
from barmanager.core.auth.dependencies import get_current_actor
from barmanager.modules.companies.service import CompaniesService
from barmanager.shared.schemas.common import MessageResponse

router = APIRouter()

@router.post("/login", response_model=TokenResponse)
async def login(
    user_login: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Login con JSON

    **Body:**
    ```json
        {
            "email": "contato@barzinho.com.br",
            "password": "senha123"
        }
    ```

    Busca primero la cuenta de empresa y luego los sub-usuarios.
    """
    actor = AuthService.authenticate(db, user_login.email, user_login.password)
    return AuthService.issue_token(db, actor)


@router.post("/token", response_model=TokenResponse)
async def login_form(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    Login con formulario OAuth2 (botón "Authorize" de /docs)

    - **username**: Email de la empresa o del usuario
    - **password**: Contraseña
    """
    actor = AuthService.authenticate(db, form_data.username, form_data.password)
    return AuthService.issue_token(db, actor)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    company_data: CompanyRegister,
    db: Session = Depends(get_db)
):
    """Auto-registro de una empresa; devuelve el token de la nueva cuenta"""
    company = CompaniesService(db).register_company(company_data)
    return AuthService.issue_token(db, actor_from_company(company))


@router.get("/me", response_model=ActorProfile)
async def get_current_user_info(
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db)
):
    """Obtener información del actor autenticado"""
    return AuthService.build_profile(db, actor)


@router.post("/logout", response_model=MessageResponse)
async def logout(actor: Actor = Depends(get_current_actor)):
    """El token es stateless: el cliente lo descarta"""
    return MessageResponse(message="Sesión cerrada exitosamente")
