from kp_trades_bot.launcher import main

main()
