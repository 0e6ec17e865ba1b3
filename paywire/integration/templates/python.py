"""Python backend families: Django app, Flask blueprint, FastAPI router."""

from paywire.integration.templates.base import BackendTemplate, fill
from paywire.integration.types import (
    ActionKind,
    BackendIntegration,
    CodeChange,
    EditItem,
    Language,
    RenderContext,
)

_DJANGO_VIEWS = """\
import hashlib
import hmac
import json
import time

import razorpay
from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

client = razorpay.Client(auth=(settings.%%key_id_env, settings.%%key_secret_env))


@csrf_exempt
@require_POST
def create_order(request):
    try:
        data = json.loads(request.body)
        amount = data.get('amount', 0)

        if amount <= 0:
            return JsonResponse({'success': False, 'error': 'Invalid amount'}, status=400)

        order = client.order.create({
            'amount': int(round(amount * 100)),  # rupees to paise
            'currency': data.get('currency', 'INR'),
            'receipt': data.get('receipt') or f'receipt_{int(time.time())}',
        })

        return JsonResponse({
            'success': True,
            'orderId': order['id'],
            'amount': order['amount'],
            'currency': order['currency'],
            'keyId': settings.%%key_id_env,
        })
    except Exception as e:
        return JsonResponse({'success': False, 'error': str(e)}, status=500)


@csrf_exempt
@require_POST
def verify_payment(request):
    try:
        data = json.loads(request.body)
        razorpay_order_id = data.get('razorpay_order_id')
        razorpay_payment_id = data.get('razorpay_payment_id')
        razorpay_signature = data.get('razorpay_signature')

        if not all([razorpay_order_id, razorpay_payment_id, razorpay_signature]):
            return JsonResponse({'success': False, 'error': 'Missing payment details'}, status=400)

        msg = f'{razorpay_order_id}|{razorpay_payment_id}'
        expected_signature = hmac.new(
            settings.%%key_secret_env.encode(),
            msg.encode(),
            hashlib.sha256,
        ).hexdigest()

        if hmac.compare_digest(expected_signature, razorpay_signature):
            return JsonResponse({
                'success': True,
                'message': 'Payment verified',
                'paymentId': razorpay_payment_id,
                'orderId': razorpay_order_id,
            })
        return JsonResponse({'success': False, 'error': 'Invalid signature'}, status=400)
    except Exception as e:
        return JsonResponse({'success': False, 'error': str(e)}, status=500)
"""

_DJANGO_URLS = """\
from django.urls import path

from . import views

urlpatterns = [
    path('%%order_route', views.create_order, name='razorpay_order'),
    path('%%verify_route', views.verify_payment, name='razorpay_verify'),
]
"""

_FLASK_BLUEPRINT = """\
import hashlib
import hmac
import os
import time

import razorpay
from dotenv import load_dotenv
from flask import Blueprint, jsonify, request

load_dotenv()

razorpay_bp = Blueprint('razorpay', __name__, url_prefix='%%api_prefix')
client = razorpay.Client(auth=(os.environ['%%key_id_env'], os.environ['%%key_secret_env']))


@razorpay_bp.route('/order', methods=['POST'])
def create_order():
    try:
        data = request.get_json() or {}
        amount = data.get('amount', 0)

        if amount <= 0:
            return jsonify({'success': False, 'error': 'Invalid amount'}), 400

        order = client.order.create({
            'amount': int(round(amount * 100)),  # rupees to paise
            'currency': data.get('currency', 'INR'),
            'receipt': data.get('receipt') or f'receipt_{int(time.time())}',
        })

        return jsonify({
            'success': True,
            'orderId': order['id'],
            'amount': order['amount'],
            'currency': order['currency'],
            'keyId': os.environ['%%key_id_env'],
        })
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@razorpay_bp.route('/verify', methods=['POST'])
def verify_payment():
    try:
        data = request.get_json() or {}
        razorpay_order_id = data.get('razorpay_order_id')
        razorpay_payment_id = data.get('razorpay_payment_id')
        razorpay_signature = data.get('razorpay_signature')

        if not all([razorpay_order_id, razorpay_payment_id, razorpay_signature]):
            return jsonify({'success': False, 'error': 'Missing payment details'}), 400

        msg = f'{razorpay_order_id}|{razorpay_payment_id}'
        expected = hmac.new(
            os.environ['%%key_secret_env'].encode(), msg.encode(), hashlib.sha256
        ).hexdigest()

        if hmac.compare_digest(expected, razorpay_signature):
            return jsonify({'success': True, 'paymentId': razorpay_payment_id, 'orderId': razorpay_order_id})
        return jsonify({'success': False, 'error': 'Invalid signature'}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500
"""

_FASTAPI_ROUTER = """\
import hashlib
import hmac
import os
import time
from typing import Optional

import razorpay
from dotenv import load_dotenv
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

load_dotenv()

router = APIRouter(prefix="%%api_prefix", tags=["razorpay"])
client = razorpay.Client(auth=(os.environ["%%key_id_env"], os.environ["%%key_secret_env"]))


class OrderRequest(BaseModel):
    amount: float
    currency: str = "INR"
    receipt: Optional[str] = None


class VerifyRequest(BaseModel):
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str


@router.post("/order")
async def create_order(req: OrderRequest):
    if req.amount <= 0:
        raise HTTPException(status_code=400, detail="Invalid amount")
    try:
        order = client.order.create({
            "amount": int(round(req.amount * 100)),  # rupees to paise
            "currency": req.currency,
            "receipt": req.receipt or f"receipt_{int(time.time())}",
        })
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "success": True,
        "orderId": order["id"],
        "amount": order["amount"],
        "currency": order["currency"],
        "keyId": os.environ["%%key_id_env"],
    }


@router.post("/verify")
async def verify_payment(req: VerifyRequest):
    msg = f"{req.razorpay_order_id}|{req.razorpay_payment_id}"
    expected = hmac.new(
        os.environ["%%key_secret_env"].encode(), msg.encode(), hashlib.sha256
    ).hexdigest()

    if hmac.compare_digest(expected, req.razorpay_signature):
        return {"success": True, "paymentId": req.razorpay_payment_id, "orderId": req.razorpay_order_id}
    raise HTTPException(status_code=400, detail="Invalid signature")
"""


def _relative_route(ctx: RenderContext, url: str) -> str:
    """Route pattern below the mount point, with no trailing slash."""
    return url[len(ctx.api_prefix):].lstrip("/")


class DjangoBackend(BackendTemplate):
    label = "Django"
    languages = (Language.PYTHON,)
    ecosystem = "python"
    packages = ("razorpay",)

    def render(self, ctx: RenderContext) -> BackendIntegration:
        mount_path = ctx.api_prefix.strip("/") + "/"

        settings_edit = CodeChange(
            action=ActionKind.MANUAL_EDIT,
            path="settings.py",
            description="Add Razorpay keys to settings.py",
            edits=(
                EditItem(line="Top of file, with other imports", add="import os", why="Needed to read env vars"),
                EditItem(
                    line="After other settings",
                    add=f"{ctx.key_id_env} = os.environ.get('{ctx.key_id_env}')",
                    why="Razorpay key ID",
                ),
                EditItem(
                    line=f"After {ctx.key_id_env}",
                    add=f"{ctx.key_secret_env} = os.environ.get('{ctx.key_secret_env}')",
                    why="Razorpay key secret",
                ),
            ),
        )
        urls_edit = CodeChange(
            action=ActionKind.MANUAL_EDIT,
            path="urls.py",
            description="Mount the Razorpay URLs in the project's main urls.py",
            edits=(
                EditItem(
                    line="With the other django.urls imports",
                    add="from django.urls import include",
                    why="Needed to mount the app's URL patterns",
                ),
                EditItem(
                    line="In urlpatterns",
                    add=f"path('{mount_path}', include('razorpay_payments.urls')),",
                    why="Mount Razorpay URLs",
                ),
            ),
        )

        setup_steps = (
            "Create razorpay_payments app with views.py and urls.py",
            "Add razorpay_payments to INSTALLED_APPS",
            f"Add {ctx.key_id_env} and {ctx.key_secret_env} to settings.py "
            "(add import os at top if not present)",
            "Include razorpay_payments.urls in main urls.py",
            f"Create {self.env_file} with Razorpay keys",
        )

        return BackendIntegration(
            label=self.label,
            created=(
                CodeChange(
                    action=ActionKind.CREATE,
                    path="razorpay_payments/views.py",
                    code=fill(_DJANGO_VIEWS, ctx),
                    description="Django views for Razorpay",
                ),
                CodeChange(
                    action=ActionKind.CREATE,
                    path="razorpay_payments/urls.py",
                    code=fill(
                        _DJANGO_URLS,
                        ctx,
                        order_route=_relative_route(ctx, ctx.order_url),
                        verify_route=_relative_route(ctx, ctx.verify_url),
                    ),
                    description="Django URL patterns",
                ),
            ),
            wiring=(settings_edit, urls_edit),
            packages=self.packages,
            setup_steps=setup_steps,
            env_file=self.env_file,
        )


class FlaskBackend(BackendTemplate):
    label = "Flask"
    languages = (Language.PYTHON,)
    ecosystem = "python"
    packages = ("razorpay", "python-dotenv")

    def render(self, ctx: RenderContext) -> BackendIntegration:
        app_edit = CodeChange(
            action=ActionKind.MANUAL_EDIT,
            path="app.py",
            description="Register the Razorpay blueprint",
            edits=(
                EditItem(
                    line="After imports",
                    add="from razorpay_routes import razorpay_bp",
                    why="Import blueprint",
                ),
                EditItem(
                    line="After app = Flask(__name__)",
                    add="app.register_blueprint(razorpay_bp)",
                    why="Mount the Razorpay routes on the app",
                ),
            ),
        )

        setup_steps = (
            "Create razorpay_routes.py with the Razorpay blueprint",
            "Import and register the blueprint in your main app.py",
            f"Create {self.env_file} with Razorpay keys",
        )

        return BackendIntegration(
            label=self.label,
            created=(
                CodeChange(
                    action=ActionKind.CREATE,
                    path="razorpay_routes.py",
                    code=fill(_FLASK_BLUEPRINT, ctx),
                    description="Flask blueprint for Razorpay",
                ),
            ),
            wiring=(app_edit,),
            packages=self.packages,
            setup_steps=setup_steps,
            env_file=self.env_file,
        )


class FastAPIBackend(BackendTemplate):
    label = "FastAPI"
    languages = (Language.PYTHON,)
    ecosystem = "python"
    packages = ("razorpay", "python-dotenv")

    def render(self, ctx: RenderContext) -> BackendIntegration:
        main_edit = CodeChange(
            action=ActionKind.MANUAL_EDIT,
            path="main.py",
            description="Add router",
            edits=(
                EditItem(
                    line="After imports",
                    add="from routers.razorpay import router as razorpay_router",
                    why="Import router",
                ),
                EditItem(
                    line="After app creation",
                    add="app.include_router(razorpay_router)",
                    why="Include router",
                ),
            ),
        )

        setup_steps = (
            "Create routers/razorpay.py with the Razorpay endpoints",
            "Import and include router in main.py",
            f"Create {self.env_file} with Razorpay keys",
        )

        return BackendIntegration(
            label=self.label,
            created=(
                CodeChange(
                    action=ActionKind.CREATE,
                    path="routers/razorpay.py",
                    code=fill(_FASTAPI_ROUTER, ctx),
                    description="FastAPI router for Razorpay",
                ),
            ),
            wiring=(main_edit,),
            packages=self.packages,
            setup_steps=setup_steps,
            env_file=self.env_file,
        )
