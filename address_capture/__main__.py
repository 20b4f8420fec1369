from address_capture.cli import main

raise SystemExit(main())
