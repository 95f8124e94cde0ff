# e2e/src/selectors/login_selectors.py

USERNAME_INPUT_SELECTOR = "#user-name"
PASSWORD_INPUT_SELECTOR = "#password"
LOGIN_BUTTON_SELECTOR = "#login-button"

# ログイン失敗時のエラー表示（例: "Epic sadface: Sorry, this user has been locked out."）
LOGIN_ERROR_SELECTOR = "h3[data-test='error']"
