from .demonstration import main

raise SystemExit(main())
