"""dash-webhook-composer application.

Serves the webhook composer page.  Configuration comes from the environment
(optionally a ``.env`` file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

import dash
import dash_mantine_components as dmc

HOST = os.getenv("COMPOSER_HOST", "127.0.0.1")
PORT = int(os.getenv("COMPOSER_PORT", "8150"))
DEBUG = os.getenv("COMPOSER_DEBUG", "").lower() in ("1", "true", "yes")

app = dash.Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    external_stylesheets=dmc.styles.ALL,
)

app.layout = dmc.MantineProvider(
    dmc.AppShell(
        [
            dmc.AppShellHeader(
                dmc.Group(
                    [
                        dmc.Text("dash-webhook-composer", fw=700, size="lg"),
                        dmc.Anchor(
                            "Composer", href="/", underline="never",
                            c="dimmed", fw=500, size="sm",
                        ),
                    ],
                    justify="space-between",
                    px="md",
                    h="100%",
                ),
            ),
            dmc.AppShellMain(
                dash.page_container,
            ),
        ],
        header={"height": 56},
        padding="md",
    ),
    forceColorScheme="dark",
)

if __name__ == "__main__":
    app.run(debug=DEBUG, host=HOST, port=PORT)
