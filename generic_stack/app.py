import os
from functools import wraps

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from generic_stack.models import StackKind, parse_kind
from generic_stack.stack_playground import StackPlayground

app = Flask(__name__)
app.secret_key = os.environ.get("STACK_PLAYGROUND_SECRET_KEY", "dev-secret-key")

playground = StackPlayground()
playground.reset()


# -------------------------
# 共通：スタック種別チェック
# -------------------------
def require_kind(fn):
    @wraps(fn)
    def inner(kind, *args, **kwargs):
        parsed = parse_kind(kind)
        if parsed is None:
            app.logger.warning("unknown stack kind: %s", kind)
            abort(404)
        return fn(parsed, *args, **kwargs)
    return inner


def flash_result(ok: bool, msg: str) -> None:
    flash(msg, "success" if ok else "error")


# -------------------------
# ダッシュボード
# -------------------------
@app.route("/", methods=["GET"])
def dashboard():
    return render_template(
        "dashboard.html",
        overview=playground.get_overview(),
        undo_size=playground.get_undo_size(),
        StackKind=StackKind,
    )


# -------------------------
# スタック操作
# -------------------------
@app.route("/stack/<kind>/push", methods=["POST"])
@require_kind
def stack_push(kind: StackKind):
    ok, msg = playground.push(kind, request.form.get("value") or "")
    flash_result(ok, msg)
    return redirect(url_for("dashboard"))


@app.route("/stack/<kind>/pop", methods=["POST"])
@require_kind
def stack_pop(kind: StackKind):
    ok, msg = playground.pop(kind)
    flash_result(ok, msg)
    return redirect(url_for("dashboard"))


@app.route("/stack/<kind>/peek", methods=["POST"])
@require_kind
def stack_peek(kind: StackKind):
    ok, msg = playground.peek(kind)
    flash_result(ok, msg)
    return redirect(url_for("dashboard"))


# -------------------------
# Undo / リセット
# -------------------------
@app.route("/undo", methods=["POST"])
def undo():
    ok, msg = playground.undo_last()
    flash_result(ok, msg)
    return redirect(url_for("dashboard"))


@app.route("/reset", methods=["POST"])
def reset():
    playground.reset()
    app.logger.info("playground reset from web")
    flash("已重設所有堆疊", "success")
    return redirect(url_for("dashboard"))


if __name__ == "__main__":
    app.run(debug=True)
