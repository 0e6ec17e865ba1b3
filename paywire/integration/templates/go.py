"""Go backend families: Gin, Echo and Fiber handlers.

All three share the request types, the receipt default and the
signature check; only the context type and response helpers differ.
"""

from paywire.integration.templates.base import BackendTemplate, fill
from paywire.integration.types import (
    ActionKind,
    BackendIntegration,
    CodeChange,
    EditItem,
    Language,
    RenderContext,
)

RAZORPAY_GO_MODULE = "github.com/razorpay/razorpay-go"

_HEADER = """\
package handlers

import (
	"crypto/hmac"
	"crypto/sha256"
	"encoding/hex"
	"fmt"
	"math"
%%extra_imports	"os"
	"time"

	"%%framework_module"
	razorpay "github.com/razorpay/razorpay-go"
)

var client = razorpay.NewClient(os.Getenv("%%key_id_env"), os.Getenv("%%key_secret_env"))

type OrderRequest struct {
	Amount   float64 `json:"amount"`
	Currency string  `json:"currency"`
	Receipt  string  `json:"receipt"`
}

type VerifyRequest struct {
	OrderID   string `json:"razorpay_order_id"`
	PaymentID string `json:"razorpay_payment_id"`
	Signature string `json:"razorpay_signature"`
}

func (req *OrderRequest) applyDefaults() {
	if req.Currency == "" {
		req.Currency = "INR"
	}
	if req.Receipt == "" {
		req.Receipt = fmt.Sprintf("receipt_%d", time.Now().Unix())
	}
}

func (req *OrderRequest) payload() map[string]interface{} {
	return map[string]interface{}{
		"amount":   int(math.Round(req.Amount * 100)), // rupees to paise
		"currency": req.Currency,
		"receipt":  req.Receipt,
	}
}

func validSignature(req VerifyRequest) bool {
	h := hmac.New(sha256.New, []byte(os.Getenv("%%key_secret_env")))
	h.Write([]byte(req.OrderID + "|" + req.PaymentID))
	expected := hex.EncodeToString(h.Sum(nil))
	return hmac.Equal([]byte(expected), []byte(req.Signature))
}
"""

_GIN_HANDLERS = """
func CreateOrder(c *gin.Context) {
	var req OrderRequest
	if err := c.ShouldBindJSON(&req); err != nil {
		c.JSON(http.StatusBadRequest, gin.H{"success": false, "error": err.Error()})
		return
	}
	if req.Amount <= 0 {
		c.JSON(http.StatusBadRequest, gin.H{"success": false, "error": "Invalid amount"})
		return
	}
	req.applyDefaults()

	order, err := client.Order.Create(req.payload(), nil)
	if err != nil {
		c.JSON(http.StatusInternalServerError, gin.H{"success": false, "error": err.Error()})
		return
	}

	c.JSON(http.StatusOK, gin.H{
		"success":  true,
		"orderId":  order["id"],
		"amount":   order["amount"],
		"currency": order["currency"],
		"keyId":    os.Getenv("%%key_id_env"),
	})
}

func VerifyPayment(c *gin.Context) {
	var req VerifyRequest
	if err := c.ShouldBindJSON(&req); err != nil {
		c.JSON(http.StatusBadRequest, gin.H{"success": false, "error": err.Error()})
		return
	}

	if validSignature(req) {
		c.JSON(http.StatusOK, gin.H{"success": true, "paymentId": req.PaymentID, "orderId": req.OrderID})
		return
	}
	c.JSON(http.StatusBadRequest, gin.H{"success": false, "error": "Invalid signature"})
}
"""

_ECHO_HANDLERS = """
func CreateOrder(c echo.Context) error {
	var req OrderRequest
	if err := c.Bind(&req); err != nil {
		return c.JSON(http.StatusBadRequest, map[string]interface{}{"success": false, "error": err.Error()})
	}
	if req.Amount <= 0 {
		return c.JSON(http.StatusBadRequest, map[string]interface{}{"success": false, "error": "Invalid amount"})
	}
	req.applyDefaults()

	order, err := client.Order.Create(req.payload(), nil)
	if err != nil {
		return c.JSON(http.StatusInternalServerError, map[string]interface{}{"success": false, "error": err.Error()})
	}

	return c.JSON(http.StatusOK, map[string]interface{}{
		"success":  true,
		"orderId":  order["id"],
		"amount":   order["amount"],
		"currency": order["currency"],
		"keyId":    os.Getenv("%%key_id_env"),
	})
}

func VerifyPayment(c echo.Context) error {
	var req VerifyRequest
	if err := c.Bind(&req); err != nil {
		return c.JSON(http.StatusBadRequest, map[string]interface{}{"success": false, "error": err.Error()})
	}

	if validSignature(req) {
		return c.JSON(http.StatusOK, map[string]interface{}{"success": true, "paymentId": req.PaymentID, "orderId": req.OrderID})
	}
	return c.JSON(http.StatusBadRequest, map[string]interface{}{"success": false, "error": "Invalid signature"})
}
"""

_FIBER_HANDLERS = """
func CreateOrder(c *fiber.Ctx) error {
	var req OrderRequest
	if err := c.BodyParser(&req); err != nil {
		return c.Status(fiber.StatusBadRequest).JSON(fiber.Map{"success": false, "error": err.Error()})
	}
	if req.Amount <= 0 {
		return c.Status(fiber.StatusBadRequest).JSON(fiber.Map{"success": false, "error": "Invalid amount"})
	}
	req.applyDefaults()

	order, err := client.Order.Create(req.payload(), nil)
	if err != nil {
		return c.Status(fiber.StatusInternalServerError).JSON(fiber.Map{"success": false, "error": err.Error()})
	}

	return c.JSON(fiber.Map{
		"success":  true,
		"orderId":  order["id"],
		"amount":   order["amount"],
		"currency": order["currency"],
		"keyId":    os.Getenv("%%key_id_env"),
	})
}

func VerifyPayment(c *fiber.Ctx) error {
	var req VerifyRequest
	if err := c.BodyParser(&req); err != nil {
		return c.Status(fiber.StatusBadRequest).JSON(fiber.Map{"success": false, "error": err.Error()})
	}

	if validSignature(req) {
		return c.JSON(fiber.Map{"success": true, "paymentId": req.PaymentID, "orderId": req.OrderID})
	}
	return c.Status(fiber.StatusBadRequest).JSON(fiber.Map{"success": false, "error": "Invalid signature"})
}
"""


class GoBackend(BackendTemplate):
    """Shared renderer; subclasses supply the framework specifics."""

    languages = (Language.GO,)
    ecosystem = "go"
    packages = (RAZORPAY_GO_MODULE,)

    #: Import path of the web framework
    framework_module: str = ""

    #: Extra stdlib imports the handlers need, one per line
    extra_imports: tuple[str, ...] = ()

    #: Handler bodies for this framework
    handlers_source: str = ""

    #: Route registration call, formatted with method path and handler
    route_call: str = ""

    def render(self, ctx: RenderContext) -> BackendIntegration:
        extra_imports = "".join(f'\t"{name}"\n' for name in self.extra_imports)
        code = fill(
            _HEADER + self.handlers_source,
            ctx,
            framework_module=self.framework_module,
            extra_imports=extra_imports,
        )

        main_edit = CodeChange(
            action=ActionKind.MANUAL_EDIT,
            path="main.go",
            description="Add routes",
            edits=(
                EditItem(
                    line="In the import block",
                    add='"<your-module>/handlers"',
                    why="Import the handlers package; use the module path from go.mod",
                ),
                EditItem(
                    line="In router setup",
                    add=self.route_call.format(path=ctx.order_url, handler="handlers.CreateOrder"),
                    why="Order endpoint",
                ),
                EditItem(
                    line="After order route",
                    add=self.route_call.format(path=ctx.verify_url, handler="handlers.VerifyPayment"),
                    why="Verify endpoint",
                ),
            ),
        )

        setup_steps = (
            f"Create handlers/razorpay.go with the {self.label} handlers",
            "Add routes in main.go to wire up the handlers",
            f"Set {ctx.key_id_env} and {ctx.key_secret_env} env vars",
        )

        return BackendIntegration(
            label=self.label,
            created=(
                CodeChange(
                    action=ActionKind.CREATE,
                    path="handlers/razorpay.go",
                    code=code,
                    description=f"{self.label} handlers for Razorpay",
                ),
            ),
            wiring=(main_edit,),
            packages=self.packages,
            setup_steps=setup_steps,
            env_file=self.env_file,
        )


class GinBackend(GoBackend):
    label = "Gin"
    framework_module = "github.com/gin-gonic/gin"
    extra_imports = ("net/http",)
    handlers_source = _GIN_HANDLERS
    route_call = 'r.POST("{path}", {handler})'


class EchoBackend(GoBackend):
    label = "Echo"
    framework_module = "github.com/labstack/echo/v4"
    extra_imports = ("net/http",)
    handlers_source = _ECHO_HANDLERS
    route_call = 'e.POST("{path}", {handler})'


class FiberBackend(GoBackend):
    label = "Fiber"
    framework_module = "github.com/gofiber/fiber/v2"
    handlers_source = _FIBER_HANDLERS
    route_call = 'app.Post("{path}", {handler})'
