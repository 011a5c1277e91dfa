import sys

from dotwheels.render_scene import main

sys.exit(main())
