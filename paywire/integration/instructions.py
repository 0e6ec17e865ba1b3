"""Natural-language guidance attached to every plan.

The wire_payment procedure and the aiInstructions text tell the consuming
agent how to find the project's real checkout flow and route it through
Razorpay. None of it is machine-checkable, so it lives apart from the
code templates.
"""

from typing import Optional

from paywire.integration.types import FrontendIntegration, Instructional

TEST_INSTRUCTIONS = (
    "Use test card: 4111 1111 1111 1111, any future expiry, any CVV. "
    "UPI: success@razorpay"
)

WIRE_PAYMENT_DESCRIPTION = (
    "CRITICAL: Discover and modify the actual checkout flow - DO NOT assume file names"
)

_SAVE_ORDER_PATTERN = """\
   CRITICAL: Before calling initiateRazorpayPayment(), you MUST:
   a) Collect all order data (cart items, customer info, shipping address, etc.)
   b) Save it to localStorage/state so it's available in the success callback

   Example pattern:
   async function existingCheckoutFunction() {
     // 1. GET the payment amount
     const total = calculateTotal(); // or get from existing code

     // 2. SAVE order data BEFORE payment (so success callback can access it)
     const pendingOrder = {
       items: getCartItems(),
       customerInfo: {
         name: document.getElementById('name-field').value,
         email: document.getElementById('email-field').value,
         // ... other fields from the form
       },
       shippingAddress: { /* ... */ },
       // Include whatever data the original order creation needed
     };
     localStorage.setItem('pendingOrder', JSON.stringify(pendingOrder));

     // 3. THEN call Razorpay payment
     initiateRazorpayPayment(
       total,
       async (paymentResponse) => {
         // 4. On SUCCESS: retrieve saved data and create order
         const orderData = JSON.parse(localStorage.getItem('pendingOrder'));
         orderData.paymentMethod = 'razorpay';
         orderData.paymentId = paymentResponse.paymentId;
         // Call the existing order creation API with orderData
         localStorage.removeItem('pendingOrder');
       },
       (error) => {
         alert('Payment failed: ' + error.message);
         localStorage.removeItem('pendingOrder');
       }
     );
   }
"""

_COMMON_MISTAKES = """\
COMMON MISTAKES TO AVOID:
- Modifying the wrong file (e.g., app.js when checkout.html uses checkout.js)
- Adding the script to index.html when checkout is in checkout.html
- Creating new functions instead of modifying the existing checkout flow
- Leaving COD/placeholder payment code active
- NOT SAVING order data before payment (causes "order data not found" errors)
- Trying to access form fields in the success callback (form may be gone/reset)"""


def _server_rendered_procedure(frontend: FrontendIntegration) -> str:
    return f"""\
STEP-BY-STEP DISCOVERY PROCESS:

1. FIND THE CHECKOUT HTML PAGE:
   - Look for: checkout.html, cart.html, payment.html, or a checkout section in index.html
   - Check which HTML file contains the checkout form/button
   - It may NOT be index.html

2. FIND WHICH JS FILE IS LOADED BY THAT HTML:
   - Look at <script> tags in the checkout HTML
   - Common names: checkout.js, cart.js, payment.js, app.js, main.js, bundle.js
   - The correct file is whatever the checkout HTML actually loads, not app.js by default

3. ADD THE RAZORPAY FRONTEND CODE TO THE CORRECT PAGE:
   - {frontend.script_tag}
   - Load it BEFORE the checkout JS file so it's available

4. FIND THE PAYMENT/CHECKOUT FUNCTION:
   - Search for: initiatePayment, handleCheckout, checkout, placeOrder,
     processPayment, submitOrder, handlePayment
   - Look for comments like "payment integration", "add payment here", "TODO"
   - Look for paymentMethod: 'cod' or placeholder payment code

5. MODIFY THAT FUNCTION to call initiateRazorpayPayment():

{_SAVE_ORDER_PATTERN}
{_COMMON_MISTAKES}"""


def _generic_procedure(frontend: FrontendIntegration) -> str:
    return f"""\
STEP-BY-STEP DISCOVERY PROCESS:

1. FIND THE CHECKOUT/PAYMENT PAGE:
   - Look for: checkout.html, cart.html, payment.html, or a checkout route/component
   - For SPAs: find the checkout component/page
   - For server templates: find the template with the checkout form

2. FIND WHICH JS/COMPONENT HANDLES CHECKOUT:
   - Check <script> tags or imports
   - Common names: checkout.js, cart.js, payment.js, Checkout.jsx/vue/svelte
   - DO NOT assume app.js or main.js

3. ADD THE RAZORPAY FRONTEND CODE:
   - {frontend.script_tag}

4. FIND THE PAYMENT/CHECKOUT FUNCTION:
   - Search for: initiatePayment, handleCheckout, checkout, placeOrder, processPayment, submitOrder
   - Look for: paymentMethod: 'cod', payment placeholders, TODO comments

5. MODIFY THAT FUNCTION to use Razorpay:

{_SAVE_ORDER_PATTERN}
{_COMMON_MISTAKES}"""


def wire_payment_action(frontend: FrontendIntegration, server_rendered: bool) -> Instructional:
    """Build the single wire_payment action that closes every plan.

    server_rendered selects the procedure tuned for plain HTML pages that
    load scripts directly, as served by an Express app.
    """
    if server_rendered:
        procedure = _server_rendered_procedure(frontend)
    else:
        procedure = _generic_procedure(frontend)
    return Instructional(description=WIRE_PAYMENT_DESCRIPTION, procedure=procedure)


def backend_setup_block(install_command: str, steps: tuple[str, ...]) -> str:
    lines = ["BACKEND SETUP:", f"1) {install_command}"]
    for number, step in enumerate(steps, start=2):
        lines.append(f"{number}) {step}")
    return "\n".join(lines)


def frontend_wiring_block(frontend: FrontendIntegration) -> str:
    return f"""\
**CRITICAL - FRONTEND WIRING (DO NOT SKIP):**

1. DISCOVER the project structure:
   - Find where the checkout page/component is
   - Find which file handles the checkout logic
   - DO NOT assume file names like app.js or index.html

2. ADD the Razorpay frontend code ({frontend.file_name}):
   - {frontend.script_tag}
   - Make sure it's loaded BEFORE the checkout code

3. WIRE UP the payment:
   - Find the existing checkout/payment function
   - Modify it to call the Razorpay payment function
   - Order creation should happen ONLY after payment succeeds
   - Payment failures should show an error without creating an order

THE INTEGRATION IS **NOT COMPLETE** IF:
- You modified the wrong JS file (one not used by the checkout page)
- The checkout still bypasses payment (COD, direct order creation)
- You tell the user to "wire up payment" as a next step

DO NOT give "Next Steps" - complete EVERYTHING including frontend wiring."""


def project_hints_block(
    existing_order_endpoint: Optional[str] = None,
    existing_payment_function: Optional[str] = None,
) -> str:
    """Return the PROJECT HINTS block, or "" when no hint was supplied."""
    hints = []
    if existing_order_endpoint:
        hints.append(
            f"- Existing order endpoint: {existing_order_endpoint}. "
            "Call it ONLY after the payment is verified, passing paymentMethod: 'razorpay' "
            "and the paymentId."
        )
    if existing_payment_function:
        hints.append(
            f"- Existing payment function: {existing_payment_function}. "
            "Modify THIS function to start the Razorpay payment instead of writing a new one."
        )
    if not hints:
        return ""
    return "**PROJECT HINTS:**\n" + "\n".join(hints)


def ai_instructions(
    backend_steps: str,
    frontend: FrontendIntegration,
    existing_order_endpoint: Optional[str] = None,
    existing_payment_function: Optional[str] = None,
) -> str:
    blocks = [backend_steps, frontend_wiring_block(frontend)]
    hints = project_hints_block(existing_order_endpoint, existing_payment_function)
    if hints:
        blocks.append(hints)
    return "\n\n".join(blocks)
