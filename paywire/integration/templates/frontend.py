"""Frontend checkout artifacts, one template per UI framework.

Every artifact loads checkout.js from Razorpay's CDN, posts the amount to
the order endpoint, opens the checkout modal and posts the modal's
response to the verify endpoint. Only the framework glue differs.
"""

from paywire.integration.templates.base import FrontendTemplate, fill
from paywire.integration.types import RenderContext

CHECKOUT_SCRIPT_URL = "https://checkout.razorpay.com/v1/checkout.js"


_VANILLA = """\
// Razorpay payment helper
async function initiateRazorpayPayment(amount, onSuccess, onError) {
  try {
    if (!window.Razorpay) {
      await new Promise((resolve, reject) => {
        const script = document.createElement('script');
        script.src = '%%script_url';
        script.onload = resolve;
        script.onerror = reject;
        document.head.appendChild(script);
      });
    }

    const orderResponse = await fetch('%%order_url', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({ amount }),
    });
    const orderData = await orderResponse.json();
    if (!orderData.success) throw new Error(orderData.error || 'Failed to create order');

    const options = {
      key: orderData.keyId,
      amount: orderData.amount,
      currency: orderData.currency,
      name: document.title || 'Payment',
      order_id: orderData.orderId,
      handler: async function (response) {
        const verifyResponse = await fetch('%%verify_url', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(response),
        });
        const verifyData = await verifyResponse.json();
        if (verifyData.success) {
          if (onSuccess) onSuccess(verifyData);
        } else if (onError) {
          onError(new Error(verifyData.error));
        }
      },
      modal: { ondismiss: () => { if (onError) onError(new Error('Payment cancelled')); } },
      theme: { color: '#528FF0' },
    };

    const razorpay = new window.Razorpay(options);
    razorpay.on('payment.failed', (r) => { if (onError) onError(new Error(r.error.description)); });
    razorpay.open();
  } catch (error) {
    console.error('Payment failed:', error);
    if (onError) onError(error);
  }
}
"""


_REACT_JS = """\
import { useState, useEffect } from 'react';

export function useRazorpay() {
  const [loading, setLoading] = useState(false);
  const [ready, setReady] = useState(false);

  useEffect(() => {
    const script = document.createElement('script');
    script.src = '%%script_url';
    script.onload = () => setReady(true);
    document.body.appendChild(script);
    return () => document.body.removeChild(script);
  }, []);

  const pay = async (amount, onSuccess, onError) => {
    if (!ready || loading) return;
    setLoading(true);
    try {
      const res = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount }),
      });
      const data = await res.json();
      if (!data.success) throw new Error(data.error);

      const options = {
        key: data.keyId,
        amount: data.amount,
        currency: data.currency,
        order_id: data.orderId,
        handler: async (response) => {
          const verify = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const result = await verify.json();
          result.success ? onSuccess?.(result) : onError?.(new Error(result.error));
          setLoading(false);
        },
        modal: { ondismiss: () => setLoading(false) },
      };
      new window.Razorpay(options).open();
    } catch (e) {
      onError?.(e);
      setLoading(false);
    }
  };

  return { pay, loading, ready };
}

export function RazorpayButton({ amount, onSuccess, onError, children }) {
  const { pay, loading, ready } = useRazorpay();
  return (
    <button onClick={() => pay(amount, onSuccess, onError)} disabled={!ready || loading}>
      {loading ? 'Processing...' : children || 'Pay Now'}
    </button>
  );
}
"""


_REACT_TS = """\
import { useState, useEffect, type ReactNode } from 'react';

export interface PaymentResult {
  success: boolean;
  paymentId: string;
  orderId: string;
}

type SuccessHandler = (result: PaymentResult) => void;
type ErrorHandler = (error: Error) => void;

declare global {
  interface Window {
    Razorpay: any;
  }
}

export function useRazorpay() {
  const [loading, setLoading] = useState(false);
  const [ready, setReady] = useState(false);

  useEffect(() => {
    const script = document.createElement('script');
    script.src = '%%script_url';
    script.onload = () => setReady(true);
    document.body.appendChild(script);
    return () => {
      document.body.removeChild(script);
    };
  }, []);

  const pay = async (amount: number, onSuccess?: SuccessHandler, onError?: ErrorHandler) => {
    if (!ready || loading) return;
    setLoading(true);
    try {
      const res = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount }),
      });
      const data = await res.json();
      if (!data.success) throw new Error(data.error);

      const options = {
        key: data.keyId,
        amount: data.amount,
        currency: data.currency,
        order_id: data.orderId,
        handler: async (response: Record<string, string>) => {
          const verify = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const result = await verify.json();
          result.success ? onSuccess?.(result) : onError?.(new Error(result.error));
          setLoading(false);
        },
        modal: { ondismiss: () => setLoading(false) },
      };
      new window.Razorpay(options).open();
    } catch (e) {
      onError?.(e as Error);
      setLoading(false);
    }
  };

  return { pay, loading, ready };
}

interface RazorpayButtonProps {
  amount: number;
  onSuccess?: SuccessHandler;
  onError?: ErrorHandler;
  children?: ReactNode;
}

export function RazorpayButton({ amount, onSuccess, onError, children }: RazorpayButtonProps) {
  const { pay, loading, ready } = useRazorpay();
  return (
    <button onClick={() => pay(amount, onSuccess, onError)} disabled={!ready || loading}>
      {loading ? 'Processing...' : children || 'Pay Now'}
    </button>
  );
}
"""


_NEXTJS_TS = """\
'use client';

import { useState } from 'react';
import Script from 'next/script';

interface RazorpayCheckoutProps {
  amount: number;
  onSuccess?: (data: { paymentId: string; orderId: string }) => void;
  onError?: (error: Error) => void;
  buttonText?: string;
  className?: string;
}

export function RazorpayCheckout({
  amount,
  onSuccess,
  onError,
  buttonText = 'Pay Now',
  className = '',
}: RazorpayCheckoutProps) {
  const [loading, setLoading] = useState(false);
  const [scriptLoaded, setScriptLoaded] = useState(false);

  const handlePayment = async () => {
    if (!scriptLoaded || loading) return;
    setLoading(true);

    try {
      const orderRes = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount }),
      });
      const orderData = await orderRes.json();
      if (!orderData.success) throw new Error(orderData.error);

      const options = {
        key: orderData.keyId,
        amount: orderData.amount,
        currency: orderData.currency,
        name: 'Payment',
        order_id: orderData.orderId,
        handler: async (response: any) => {
          const verifyRes = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const verifyData = await verifyRes.json();
          if (verifyData.success) {
            onSuccess?.({ paymentId: verifyData.paymentId, orderId: verifyData.orderId });
          } else {
            onError?.(new Error(verifyData.error));
          }
          setLoading(false);
        },
        modal: { ondismiss: () => setLoading(false) },
        theme: { color: '#528FF0' },
      };

      const razorpay = new (window as any).Razorpay(options);
      razorpay.on('payment.failed', (res: any) => {
        onError?.(new Error(res.error.description));
        setLoading(false);
      });
      razorpay.open();
    } catch (error) {
      onError?.(error as Error);
      setLoading(false);
    }
  };

  return (
    <>
      <Script src="%%script_url" onLoad={() => setScriptLoaded(true)} />
      <button
        onClick={handlePayment}
        disabled={loading || !scriptLoaded}
        className={className || 'bg-blue-600 text-white px-6 py-2 rounded disabled:opacity-50'}
      >
        {loading ? 'Processing...' : buttonText}
      </button>
    </>
  );
}
"""


_NEXTJS_JS = """\
'use client';

import { useState } from 'react';
import Script from 'next/script';

export function RazorpayCheckout({
  amount,
  onSuccess,
  onError,
  buttonText = 'Pay Now',
  className = '',
}) {
  const [loading, setLoading] = useState(false);
  const [scriptLoaded, setScriptLoaded] = useState(false);

  const handlePayment = async () => {
    if (!scriptLoaded || loading) return;
    setLoading(true);

    try {
      const orderRes = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount }),
      });
      const orderData = await orderRes.json();
      if (!orderData.success) throw new Error(orderData.error);

      const options = {
        key: orderData.keyId,
        amount: orderData.amount,
        currency: orderData.currency,
        name: 'Payment',
        order_id: orderData.orderId,
        handler: async (response) => {
          const verifyRes = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const verifyData = await verifyRes.json();
          if (verifyData.success) {
            onSuccess?.({ paymentId: verifyData.paymentId, orderId: verifyData.orderId });
          } else {
            onError?.(new Error(verifyData.error));
          }
          setLoading(false);
        },
        modal: { ondismiss: () => setLoading(false) },
        theme: { color: '#528FF0' },
      };

      const razorpay = new window.Razorpay(options);
      razorpay.on('payment.failed', (res) => {
        onError?.(new Error(res.error.description));
        setLoading(false);
      });
      razorpay.open();
    } catch (error) {
      onError?.(error);
      setLoading(false);
    }
  };

  return (
    <>
      <Script src="%%script_url" onLoad={() => setScriptLoaded(true)} />
      <button
        onClick={handlePayment}
        disabled={loading || !scriptLoaded}
        className={className || 'bg-blue-600 text-white px-6 py-2 rounded disabled:opacity-50'}
      >
        {loading ? 'Processing...' : buttonText}
      </button>
    </>
  );
}
"""


# Shared by the vue and nuxt entries; %%script_open and %%props carry
# the only TypeScript differences.
_VUE = """\
<template>
  <button @click="pay" :disabled="!ready || loading">
    {{ loading ? 'Processing...' : 'Pay Now' }}
  </button>
</template>

%%script_open
import { ref, onMounted } from 'vue';

%%props
const emit = defineEmits(['success', 'error']);

const loading = ref(false);
const ready = ref(false);

onMounted(() => {
  if (window.Razorpay) {
    ready.value = true;
    return;
  }
  const script = document.createElement('script');
  script.src = '%%script_url';
  script.onload = () => (ready.value = true);
  document.head.appendChild(script);
});

const pay = async () => {
  if (!ready.value || loading.value) return;
  loading.value = true;
  try {
    const res = await fetch('%%order_url', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({ amount: props.amount }),
    });
    const data = await res.json();
    if (!data.success) throw new Error(data.error);

    const options = {
      key: data.keyId,
      amount: data.amount,
      currency: data.currency,
      order_id: data.orderId,
      handler: async (response) => {
        const verify = await fetch('%%verify_url', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(response),
        });
        const result = await verify.json();
        result.success ? emit('success', result) : emit('error', new Error(result.error));
        loading.value = false;
      },
      modal: { ondismiss: () => (loading.value = false) },
    };
    new window.Razorpay(options).open();
  } catch (e) {
    emit('error', e);
    loading.value = false;
  }
};
</script>
"""


_ANGULAR = """\
import { Component, Input, Output, EventEmitter, OnInit } from '@angular/core';

declare var Razorpay: any;

@Component({
  selector: 'app-razorpay-button',
  template: `
    <button (click)="pay()" [disabled]="!ready || loading">
      {{ loading ? 'Processing...' : 'Pay Now' }}
    </button>
  `,
})
export class RazorpayButtonComponent implements OnInit {
  @Input() amount: number = 0;
  @Output() success = new EventEmitter<any>();
  @Output() error = new EventEmitter<Error>();

  loading = false;
  ready = false;

  ngOnInit() {
    const script = document.createElement('script');
    script.src = '%%script_url';
    script.onload = () => (this.ready = true);
    document.head.appendChild(script);
  }

  async pay() {
    if (!this.ready || this.loading) return;
    this.loading = true;
    try {
      const res = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount: this.amount }),
      });
      const data = await res.json();
      if (!data.success) throw new Error(data.error);

      const options = {
        key: data.keyId,
        amount: data.amount,
        currency: data.currency,
        order_id: data.orderId,
        handler: async (response: any) => {
          const verify = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const result = await verify.json();
          result.success ? this.success.emit(result) : this.error.emit(new Error(result.error));
          this.loading = false;
        },
        modal: { ondismiss: () => (this.loading = false) },
      };
      new Razorpay(options).open();
    } catch (e) {
      this.error.emit(e as Error);
      this.loading = false;
    }
  }
}
"""


_SVELTE = """\
%%script_open
  import { onMount, createEventDispatcher } from 'svelte';

  export let amount%%amount_type = 0;

  const dispatch = createEventDispatcher();
  let loading = false;
  let ready = false;

  onMount(() => {
    const script = document.createElement('script');
    script.src = '%%script_url';
    script.onload = () => (ready = true);
    document.head.appendChild(script);
  });

  async function pay() {
    if (!ready || loading) return;
    loading = true;
    try {
      const res = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount }),
      });
      const data = await res.json();
      if (!data.success) throw new Error(data.error);

      const options = {
        key: data.keyId,
        amount: data.amount,
        currency: data.currency,
        order_id: data.orderId,
        handler: async (response%%any_type) => {
          const verify = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const result = await verify.json();
          result.success ? dispatch('success', result) : dispatch('error', new Error(result.error));
          loading = false;
        },
        modal: { ondismiss: () => (loading = false) },
      };
      new (window%%window_cast).Razorpay(options).open();
    } catch (e) {
      dispatch('error', e);
      loading = false;
    }
  }
</script>

<button on:click={pay} disabled={!ready || loading}>
  {loading ? 'Processing...' : 'Pay Now'}
</button>
"""


_SOLID = """\
import { createSignal, onMount, onCleanup } from 'solid-js';

export function RazorpayButton(props%%props_type) {
  const [loading, setLoading] = createSignal(false);
  const [ready, setReady] = createSignal(false);

  onMount(() => {
    const script = document.createElement('script');
    script.src = '%%script_url';
    script.onload = () => setReady(true);
    document.body.appendChild(script);
    onCleanup(() => document.body.removeChild(script));
  });

  const pay = async () => {
    if (!ready() || loading()) return;
    setLoading(true);
    try {
      const res = await fetch('%%order_url', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ amount: props.amount }),
      });
      const data = await res.json();
      if (!data.success) throw new Error(data.error);

      const options = {
        key: data.keyId,
        amount: data.amount,
        currency: data.currency,
        order_id: data.orderId,
        handler: async (response%%any_type) => {
          const verify = await fetch('%%verify_url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(response),
          });
          const result = await verify.json();
          result.success ? props.onSuccess?.(result) : props.onError?.(new Error(result.error));
          setLoading(false);
        },
        modal: { ondismiss: () => setLoading(false) },
      };
      new (window%%window_cast).Razorpay(options).open();
    } catch (e) {
      props.onError?.(e%%error_cast);
      setLoading(false);
    }
  };

  return (
    <button onClick={pay} disabled={!ready() || loading()}>
      {loading() ? 'Processing...' : props.children || 'Pay Now'}
    </button>
  );
}
"""

_SOLID_PROPS_TYPE = (
    ": {\n"
    "  amount: number;\n"
    "  onSuccess?: (result: any) => void;\n"
    "  onError?: (error: Error) => void;\n"
    "  children?: any;\n"
    "}"
)


def _jsx_ext(ctx: RenderContext) -> str:
    return "tsx" if ctx.typed else "jsx"


class VanillaFrontend(FrontendTemplate):
    framework = "Vanilla JS"
    description = "Vanilla JS Razorpay payment helper"
    script_tag = (
        'Add <script src="/js/razorpay.js"></script> to the CHECKOUT HTML file '
        "(find which HTML has the checkout - may be checkout.html, cart.html, "
        "NOT just index.html)"
    )

    def file_name(self, ctx: RenderContext) -> str:
        return "public/js/razorpay.js"

    def render(self, ctx: RenderContext) -> str:
        return fill(_VANILLA, ctx, script_url=CHECKOUT_SCRIPT_URL)


class ReactFrontend(FrontendTemplate):
    framework = "React"
    description = "React hook and component for Razorpay payments"
    script_tag = "Import and use <RazorpayButton amount={100} onSuccess={...} />"

    def file_name(self, ctx: RenderContext) -> str:
        return f"src/components/RazorpayButton.{_jsx_ext(ctx)}"

    def render(self, ctx: RenderContext) -> str:
        source = _REACT_TS if ctx.typed else _REACT_JS
        return fill(source, ctx, script_url=CHECKOUT_SCRIPT_URL)


class NextjsFrontend(FrontendTemplate):
    framework = "React"
    description = "React component for Razorpay checkout button"
    script_tag = (
        "Import { RazorpayCheckout } from '@/components/RazorpayCheckout' "
        "and render <RazorpayCheckout amount={100} onSuccess={...} /> in the checkout page"
    )

    def file_name(self, ctx: RenderContext) -> str:
        # TypeScript is the Next.js default; plain JS only when asked for.
        ext = "jsx" if ctx.language.value == "javascript" else "tsx"
        return f"components/RazorpayCheckout.{ext}"

    def render(self, ctx: RenderContext) -> str:
        source = _NEXTJS_JS if ctx.language.value == "javascript" else _NEXTJS_TS
        return fill(source, ctx, script_url=CHECKOUT_SCRIPT_URL)


class VueFrontend(FrontendTemplate):
    framework = "Vue"
    description = "Vue 3 component for Razorpay payments"
    script_tag = 'Import and use <RazorpayButton :amount="100" @success="..." />'

    def file_name(self, ctx: RenderContext) -> str:
        return "src/components/RazorpayButton.vue"

    def render(self, ctx: RenderContext) -> str:
        if ctx.typed:
            script_open = '<script setup lang="ts">'
            props = "const props = defineProps<{ amount: number }>();\ndeclare const window: any;"
        else:
            script_open = "<script setup>"
            props = "const props = defineProps({ amount: Number });"
        return fill(
            _VUE,
            ctx,
            script_url=CHECKOUT_SCRIPT_URL,
            script_open=script_open,
            props=props,
        )


class NuxtFrontend(VueFrontend):
    framework = "Nuxt"
    description = "Nuxt 3 component for Razorpay payments"
    script_tag = (
        'Use <ClientOnly><RazorpayButton :amount="100" @success="..." /></ClientOnly> '
        "in the checkout page; the component touches window and must not render on the server"
    )

    def file_name(self, ctx: RenderContext) -> str:
        return "components/RazorpayButton.vue"


class AngularFrontend(FrontendTemplate):
    framework = "Angular"
    description = "Angular component for Razorpay payments"
    script_tag = (
        "Add to module declarations and use "
        '<app-razorpay-button [amount]="100" (success)="...">'
    )

    def file_name(self, ctx: RenderContext) -> str:
        return "src/app/components/razorpay-button.component.ts"

    def render(self, ctx: RenderContext) -> str:
        return fill(_ANGULAR, ctx, script_url=CHECKOUT_SCRIPT_URL)


class SvelteFrontend(FrontendTemplate):
    framework = "Svelte"
    description = "Svelte component for Razorpay payments"
    script_tag = "Import and use <RazorpayButton amount={100} on:success={...} />"

    def file_name(self, ctx: RenderContext) -> str:
        return "src/components/RazorpayButton.svelte"

    def render(self, ctx: RenderContext) -> str:
        typed = ctx.typed
        return fill(
            _SVELTE,
            ctx,
            script_url=CHECKOUT_SCRIPT_URL,
            script_open='<script lang="ts">' if typed else "<script>",
            amount_type=": number" if typed else "",
            any_type=": any" if typed else "",
            window_cast=" as any" if typed else "",
        )


class SolidFrontend(FrontendTemplate):
    framework = "Solid"
    description = "Solid component for Razorpay payments"
    script_tag = "Import and use <RazorpayButton amount={100} onSuccess={...} />"

    def file_name(self, ctx: RenderContext) -> str:
        return f"src/components/RazorpayButton.{_jsx_ext(ctx)}"

    def render(self, ctx: RenderContext) -> str:
        typed = ctx.typed
        return fill(
            _SOLID,
            ctx,
            script_url=CHECKOUT_SCRIPT_URL,
            props_type=_SOLID_PROPS_TYPE if typed else "",
            any_type=": any" if typed else "",
            window_cast=" as any" if typed else "",
            error_cast=" as Error" if typed else "",
        )
