"""Node.js backend families: Express routers and Next.js route handlers."""

from paywire.integration.templates.base import BackendTemplate, fill
from paywire.integration.types import (
    ActionKind,
    BackendIntegration,
    CodeChange,
    EditItem,
    Language,
    RenderContext,
)

_EXPRESS_ROUTES_JS = """\
const express = require('express');
const Razorpay = require('razorpay');
const crypto = require('crypto');

const router = express.Router();

const razorpay = new Razorpay({
  key_id: process.env.%%key_id_env,
  key_secret: process.env.%%key_secret_env,
});

// Create Razorpay order
router.post('/order', async (req, res) => {
  try {
    const { amount, currency = 'INR', receipt } = req.body;

    if (!amount || amount <= 0) {
      return res.status(400).json({ success: false, error: 'Invalid amount' });
    }

    const order = await razorpay.orders.create({
      amount: Math.round(amount * 100), // rupees to paise
      currency,
      receipt: receipt || `receipt_${Date.now()}`,
    });

    res.json({
      success: true,
      orderId: order.id,
      amount: order.amount,
      currency: order.currency,
      keyId: process.env.%%key_id_env,
    });
  } catch (error) {
    console.error('Razorpay order creation failed:', error);
    res.status(500).json({ success: false, error: 'Failed to create payment order' });
  }
});

// Verify payment signature
router.post('/verify', (req, res) => {
  try {
    const { razorpay_order_id, razorpay_payment_id, razorpay_signature } = req.body;

    if (!razorpay_order_id || !razorpay_payment_id || !razorpay_signature) {
      return res.status(400).json({ success: false, error: 'Missing payment details' });
    }

    const expectedSignature = crypto
      .createHmac('sha256', process.env.%%key_secret_env)
      .update(razorpay_order_id + '|' + razorpay_payment_id)
      .digest('hex');

    const expected = Buffer.from(expectedSignature);
    const received = Buffer.from(razorpay_signature);

    if (expected.length === received.length && crypto.timingSafeEqual(expected, received)) {
      res.json({
        success: true,
        message: 'Payment verified successfully',
        paymentId: razorpay_payment_id,
        orderId: razorpay_order_id,
      });
    } else {
      res.status(400).json({ success: false, error: 'Invalid payment signature' });
    }
  } catch (error) {
    console.error('Payment verification failed:', error);
    res.status(500).json({ success: false, error: 'Payment verification failed' });
  }
});

module.exports = router;
"""

_EXPRESS_ROUTES_TS = """\
import { Router, type Request, type Response } from 'express';
import Razorpay from 'razorpay';
import crypto from 'crypto';

const router = Router();

const razorpay = new Razorpay({
  key_id: process.env.%%key_id_env as string,
  key_secret: process.env.%%key_secret_env as string,
});

interface OrderBody {
  amount?: number;
  currency?: string;
  receipt?: string;
}

interface VerifyBody {
  razorpay_order_id?: string;
  razorpay_payment_id?: string;
  razorpay_signature?: string;
}

// Create Razorpay order
router.post('/order', async (req: Request<{}, {}, OrderBody>, res: Response) => {
  try {
    const { amount, currency = 'INR', receipt } = req.body;

    if (!amount || amount <= 0) {
      return res.status(400).json({ success: false, error: 'Invalid amount' });
    }

    const order = await razorpay.orders.create({
      amount: Math.round(amount * 100), // rupees to paise
      currency,
      receipt: receipt || `receipt_${Date.now()}`,
    });

    return res.json({
      success: true,
      orderId: order.id,
      amount: order.amount,
      currency: order.currency,
      keyId: process.env.%%key_id_env,
    });
  } catch (error) {
    console.error('Razorpay order creation failed:', error);
    return res.status(500).json({ success: false, error: 'Failed to create payment order' });
  }
});

// Verify payment signature
router.post('/verify', (req: Request<{}, {}, VerifyBody>, res: Response) => {
  try {
    const { razorpay_order_id, razorpay_payment_id, razorpay_signature } = req.body;

    if (!razorpay_order_id || !razorpay_payment_id || !razorpay_signature) {
      return res.status(400).json({ success: false, error: 'Missing payment details' });
    }

    const expectedSignature = crypto
      .createHmac('sha256', process.env.%%key_secret_env as string)
      .update(razorpay_order_id + '|' + razorpay_payment_id)
      .digest('hex');

    const expected = Buffer.from(expectedSignature);
    const received = Buffer.from(razorpay_signature);

    if (expected.length === received.length && crypto.timingSafeEqual(expected, received)) {
      return res.json({
        success: true,
        message: 'Payment verified successfully',
        paymentId: razorpay_payment_id,
        orderId: razorpay_order_id,
      });
    }
    return res.status(400).json({ success: false, error: 'Invalid payment signature' });
  } catch (error) {
    console.error('Payment verification failed:', error);
    return res.status(500).json({ success: false, error: 'Payment verification failed' });
  }
});

export default router;
"""

_NEXT_ORDER_ROUTE = """\
import { NextResponse } from 'next/server';
import Razorpay from 'razorpay';

const razorpay = new Razorpay({
  key_id: process.env.%%key_id_env%%non_null,
  key_secret: process.env.%%key_secret_env%%non_null,
});

export async function POST(request%%request_type) {
  try {
    const { amount, currency = 'INR', receipt } = await request.json();

    if (!amount || amount <= 0) {
      return NextResponse.json({ success: false, error: 'Invalid amount' }, { status: 400 });
    }

    const order = await razorpay.orders.create({
      amount: Math.round(amount * 100), // rupees to paise
      currency,
      receipt: receipt || `receipt_${Date.now()}`,
    });

    return NextResponse.json({
      success: true,
      orderId: order.id,
      amount: order.amount,
      currency: order.currency,
      keyId: process.env.%%key_id_env,
    });
  } catch (error) {
    console.error('Razorpay order creation failed:', error);
    return NextResponse.json({ success: false, error: 'Failed to create order' }, { status: 500 });
  }
}
"""

_NEXT_VERIFY_ROUTE = """\
import { NextResponse } from 'next/server';
import crypto from 'crypto';

export async function POST(request%%request_type) {
  try {
    const { razorpay_order_id, razorpay_payment_id, razorpay_signature } = await request.json();

    if (!razorpay_order_id || !razorpay_payment_id || !razorpay_signature) {
      return NextResponse.json({ success: false, error: 'Missing payment details' }, { status: 400 });
    }

    const expectedSignature = crypto
      .createHmac('sha256', process.env.%%key_secret_env%%non_null)
      .update(razorpay_order_id + '|' + razorpay_payment_id)
      .digest('hex');

    const expected = Buffer.from(expectedSignature);
    const received = Buffer.from(razorpay_signature);

    if (expected.length === received.length && crypto.timingSafeEqual(expected, received)) {
      return NextResponse.json({
        success: true,
        message: 'Payment verified',
        paymentId: razorpay_payment_id,
        orderId: razorpay_order_id,
      });
    }
    return NextResponse.json({ success: false, error: 'Invalid signature' }, { status: 400 });
  } catch (error) {
    console.error('Verification failed:', error);
    return NextResponse.json({ success: false, error: 'Verification failed' }, { status: 500 });
  }
}
"""


def _script_ext(ctx: RenderContext) -> str:
    return "ts" if ctx.typed else "js"


class ExpressBackend(BackendTemplate):
    label = "Express"
    languages = (Language.JAVASCRIPT, Language.TYPESCRIPT)
    ecosystem = "node"
    packages = ("razorpay", "dotenv")

    def render(self, ctx: RenderContext) -> BackendIntegration:
        ext = _script_ext(ctx)
        routes_path = f"routes/razorpay.{ext}"
        server_path = f"server.{ext}"

        if ctx.typed:
            routes_code = fill(_EXPRESS_ROUTES_TS, ctx)
            load_env = "import 'dotenv/config';"
            import_routes = "import razorpayRoutes from './routes/razorpay';"
        else:
            routes_code = fill(_EXPRESS_ROUTES_JS, ctx)
            load_env = "require('dotenv').config();"
            import_routes = "const razorpayRoutes = require('./routes/razorpay');"
        mount = f"app.use('{ctx.api_prefix}', razorpayRoutes);"

        # Imports grouped together so they land before any usage.
        setup_code = (
            f"// Add these lines at the TOP of {server_path} (before other code):\n"
            f"{load_env}\n"
            f"{import_routes}\n"
            "\n"
            "// Add this line with your other app.use() middleware (AFTER the above imports):\n"
            f"// {mount}\n"
        )

        wiring = CodeChange(
            action=ActionKind.INSERT_CODE,
            path=server_path,
            description=f"Add Razorpay setup to {server_path} - MUST be done in this exact order",
            code=setup_code,
            edits=(
                EditItem(
                    line=f"STEP 1 - At the VERY TOP of {server_path} (line 1, before any other code)",
                    add=load_env,
                    why="Must be first line to load env vars before anything else",
                ),
                EditItem(
                    line="STEP 2 - Immediately after dotenv, with other require/import statements at the top",
                    add=import_routes,
                    why="Import MUST come before usage - add this near top with other imports",
                ),
                EditItem(
                    line="STEP 3 - Later in the file, with other app.use() middleware registrations",
                    add=mount,
                    why="Uses razorpayRoutes - MUST come AFTER the import above",
                ),
            ),
        )

        setup_steps = (
            f"Create {routes_path} (backend routes file)",
            f"Create {self.env_file} with the provided {ctx.key_id_env} and {ctx.key_secret_env}",
            (
                f"Edit {server_path} (or the main server file) - IMPORTANT ORDER:\n"
                f"   a) Add at TOP (line 1): {load_env}\n"
                f"   b) Add after dotenv, with other imports: {import_routes}\n"
                f"   c) Add LATER with middleware: {mount}"
            ),
        )

        return BackendIntegration(
            label=self.label,
            created=(
                CodeChange(
                    action=ActionKind.CREATE,
                    path=routes_path,
                    code=routes_code,
                    description="Razorpay API routes for order creation and payment verification",
                ),
            ),
            wiring=(wiring,),
            packages=self.packages,
            setup_steps=setup_steps,
            env_file=self.env_file,
        )


class NextjsBackend(BackendTemplate):
    """App Router route handlers; the file system mounts them, so no wiring."""

    label = "Next.js"
    languages = (Language.TYPESCRIPT, Language.JAVASCRIPT)
    ecosystem = "node"
    env_file = ".env.local"
    packages = ("razorpay",)

    def render(self, ctx: RenderContext) -> BackendIntegration:
        ext = _script_ext(ctx)
        typed_extra = {
            "request_type": ": Request" if ctx.typed else "",
            "non_null": "!" if ctx.typed else "",
        }
        order_path = f"app{ctx.order_url}/route.{ext}"
        verify_path = f"app{ctx.verify_url}/route.{ext}"

        setup_steps = (
            f"Create {order_path} and {verify_path}",
            f"Add {ctx.key_id_env} and {ctx.key_secret_env} to {self.env_file}",
            "No server wiring needed - Next.js mounts app/api routes automatically",
        )

        return BackendIntegration(
            label=self.label,
            created=(
                CodeChange(
                    action=ActionKind.CREATE,
                    path=order_path,
                    code=fill(_NEXT_ORDER_ROUTE, ctx, **typed_extra),
                    description="API route for creating Razorpay orders",
                ),
                CodeChange(
                    action=ActionKind.CREATE,
                    path=verify_path,
                    code=fill(_NEXT_VERIFY_ROUTE, ctx, **typed_extra),
                    description="API route for verifying payment signatures",
                ),
            ),
            packages=self.packages,
            setup_steps=setup_steps,
            env_file=self.env_file,
        )
