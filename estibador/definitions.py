"""Window settings, asset locations and sprite-sheet layout shared by the game."""

BASE_WINDOW_WIDTH = 1920.0
BASE_WINDOW_HEIGHT = 1080.0
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
GAME_TITLE = "Estibador de Ilusiones"
FRAMERATE = 144

# Assets
FONT_PATH = "assets/fonts/Monaco.ttf"
MENU_BACKGROUND_PATH = "assets/textures/menu_background.png"
BUTTON_PATH = "assets/textures/gui_button.png"
CONTAINER_PATH = "assets/textures/box_container.png"

# Sprite sheets
BUTTON_SIZE = (400, 105)
BUTTON_NORMAL_RECT = (0, 0, BUTTON_SIZE[0], BUTTON_SIZE[1])
BUTTON_HOVER_RECT = (0, 105, BUTTON_SIZE[0], BUTTON_SIZE[1])
BUTTON_TEXT_SIZE = 32